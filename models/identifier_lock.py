"""
IdentifierLock model for serializing identity resolution.

One row per identifier key (``email:<value>`` / ``phone:<value>``).
Values longer than MAX_RAW_VALUE are stored as ``<kind>:sha256:<digest>``
so any submitted identifier fits the key column.
resolve() locks the rows of every identifier it was given, so two
submissions sharing an email or phone number never run their
fetch-decide-mutate sequence at the same time.
"""

import hashlib
from datetime import timedelta

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class IdentifierLock(models.Model):
    """Advisory lock row for one identifier key."""

    MAX_RAW_VALUE = 200

    key = models.CharField(verbose_name=_("key"), max_length=300, unique=True)
    created_at = models.DateTimeField(verbose_name=_("created at"), auto_now_add=True)
    last_used_at = models.DateTimeField(
        verbose_name=_("last used at"), default=timezone.now, db_index=True
    )

    class Meta:
        db_table = "linkman_identifier_lock"
        verbose_name = _("identifier lock")
        verbose_name_plural = _("identifier locks")

    def __str__(self):
        return self.key

    @classmethod
    def key_for(cls, kind: str, value: str) -> str:
        if len(value) > cls.MAX_RAW_VALUE:
            digest = hashlib.sha256(value.encode()).hexdigest()
            return f"{kind}:sha256:{digest}"
        return f"{kind}:{value}"

    @classmethod
    def cleanup_stale(cls, days: int | None = None):
        """Remove locks not used in the last N days."""
        if days is None:
            from linkman.conf import linkman_settings
            days = linkman_settings.LOCK_CLEANUP_DAYS
        cutoff = timezone.now() - timedelta(days=days)
        return cls.objects.filter(last_used_at__lt=cutoff).delete()
