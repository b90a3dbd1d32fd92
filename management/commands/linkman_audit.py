"""Management command to check link invariants across all contacts."""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from linkman.adapters.orm import DjangoContactStore
from linkman.gates import GateError, Gates
from linkman.models import Contact
from linkman.services.identity import find_ultimate_primary


class Command(BaseCommand):
    help = "Report contacts breaking G2 (link precedence) or G3 (flat link)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--fix",
            action="store_true",
            help="Re-point chained secondaries at their ultimate primary",
        )

    def handle(self, *args, **options):
        errors = []
        fixed = 0

        for contact_id in Contact.objects.order_by("id").values_list("id", flat=True):
            try:
                Gates.link_precedence(contact_id)
            except GateError as exc:
                errors.append(exc)
                continue

            try:
                Gates.flat_link(contact_id)
            except GateError as exc:
                if options["fix"] and self._flatten(contact_id):
                    fixed += 1
                else:
                    errors.append(exc)

        for exc in errors:
            self.stdout.write(self.style.ERROR(f"{exc} {exc.details}"))
        if fixed:
            self.stdout.write(self.style.SUCCESS(f"Flattened {fixed} chained contacts."))
        if errors:
            raise CommandError(f"{len(errors)} contacts break link invariants.")

        self.stdout.write(self.style.SUCCESS("All contacts satisfy link invariants."))

    def _flatten(self, contact_id) -> bool:
        store = DjangoContactStore()
        with transaction.atomic():
            contact = store.find_by_id(contact_id)
            primary = find_ultimate_primary(store, contact)
            if not primary.is_primary:
                return False
            contact.link_to(primary)
            store.save(contact)
        return True
