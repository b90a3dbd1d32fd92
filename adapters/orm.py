"""Django ORM implementation of the ContactStore protocol."""

from __future__ import annotations

from typing import Iterable

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from linkman.models import Contact, IdentifierLock


class DjangoContactStore:
    """
    Adapter: Linkman's ContactStore over the default database.

    Reads issued inside an atomic block use SELECT ... FOR UPDATE, so rows
    a resolution looked at stay put until it commits. Backends without
    row locks (SQLite) ignore this.
    """

    def __init__(self, using: str = "default"):
        self.using = using

    def _contacts(self):
        qs = Contact.objects.using(self.using)
        if transaction.get_connection(self.using).in_atomic_block:
            qs = qs.select_for_update()
        return qs

    def find_by_email_or_phone(
        self, email: str | None, phone_number: str | None
    ) -> list[Contact]:
        query = Q()
        if email:
            query |= Q(email=email)
        if phone_number:
            query |= Q(phone_number=phone_number)
        if not query:
            return []
        return list(self._contacts().filter(query).order_by("created_at", "id"))

    def find_by_id(self, contact_id: int) -> Contact | None:
        try:
            return self._contacts().get(pk=contact_id)
        except Contact.DoesNotExist:
            return None

    def find_by_linked_id(self, contact_id: int) -> list[Contact]:
        return list(
            self._contacts().filter(linked_id=contact_id).order_by("created_at", "id")
        )

    def save(self, contact: Contact) -> Contact:
        contact.save(using=self.using)
        return contact

    def lock_identifiers(self, keys: Iterable[str]) -> None:
        # Sorted acquisition order keeps two overlapping requests from deadlocking
        keys = sorted(set(keys))
        if not keys:
            return
        locks = IdentifierLock.objects.using(self.using)
        for key in keys:
            locks.get_or_create(key=key)
        list(locks.filter(key__in=keys).order_by("key").select_for_update())
        locks.filter(key__in=keys).update(last_used_at=timezone.now())
