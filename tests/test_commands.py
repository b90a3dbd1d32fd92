"""Tests for Linkman management commands."""

from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone

from linkman.models import IdentifierLock


pytestmark = pytest.mark.django_db


class TestAuditCommand:
    def test_clean_store(self, primary, secondary):
        out = StringIO()

        call_command("linkman_audit", stdout=out)

        assert "All contacts satisfy link invariants." in out.getvalue()

    def test_chain_reported(self, make_contact, secondary):
        make_contact(email="chained@x.com", linked=secondary)
        out = StringIO()

        with pytest.raises(CommandError, match="1 contacts"):
            call_command("linkman_audit", stdout=out)

        assert "G3_FlatLink" in out.getvalue()

    def test_fix_flattens_chain(self, make_contact, primary, secondary):
        chained = make_contact(email="chained@x.com", linked=secondary)
        out = StringIO()

        call_command("linkman_audit", "--fix", stdout=out)

        chained.refresh_from_db()
        assert chained.linked_id == primary.pk
        assert "Flattened 1 chained contacts." in out.getvalue()

    def test_precedence_violation_not_fixable(self, secondary):
        secondary.linked = None
        secondary.save()

        with pytest.raises(CommandError):
            call_command("linkman_audit", "--fix", stdout=StringIO())


class TestCleanupCommand:
    def test_removes_stale_locks(self):
        IdentifierLock.objects.create(key="email:old@x.com")
        IdentifierLock.objects.create(key="email:new@x.com")
        IdentifierLock.objects.filter(key="email:old@x.com").update(
            last_used_at=timezone.now() - timedelta(days=45)
        )
        out = StringIO()

        call_command("linkman_cleanup", stdout=out)

        assert "Deleted 1 stale identifier locks." in out.getvalue()
        assert IdentifierLock.objects.count() == 1

    def test_days_override(self):
        IdentifierLock.objects.create(key="phone:1")
        IdentifierLock.objects.update(last_used_at=timezone.now() - timedelta(days=3))
        out = StringIO()

        call_command("linkman_cleanup", "--days", "2", stdout=out)

        assert not IdentifierLock.objects.exists()
