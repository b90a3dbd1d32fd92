"""Management command to cleanup stale identifier locks."""

from django.core.management.base import BaseCommand

from linkman.models import IdentifierLock


class Command(BaseCommand):
    help = "Remove identifier locks unused for LOCK_CLEANUP_DAYS"

    def add_arguments(self, parser):
        parser.add_argument(
            "--days",
            type=int,
            default=None,
            help="Override LOCK_CLEANUP_DAYS setting",
        )

    def handle(self, *args, **options):
        deleted_count, _ = IdentifierLock.cleanup_stale(days=options["days"])
        self.stdout.write(
            self.style.SUCCESS(f"Deleted {deleted_count} stale identifier locks.")
        )
