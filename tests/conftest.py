"""Pytest fixtures for Linkman tests."""

from datetime import timedelta

import pytest
from django.utils import timezone

from linkman.models import Contact, LinkPrecedence


class InMemoryContactStore:
    """ContactStore over a dict, for exercising the resolver without the ORM."""

    def __init__(self):
        self.rows: dict[int, Contact] = {}
        self.locked: list[list[str]] = []
        self._next_id = 1

    def add(self, **fields) -> Contact:
        return self.save(Contact(**fields))

    def find_by_email_or_phone(self, email, phone_number):
        return [
            c
            for c in self.rows.values()
            if (email and c.email == email)
            or (phone_number and c.phone_number == phone_number)
        ]

    def find_by_id(self, contact_id):
        return self.rows.get(contact_id)

    def find_by_linked_id(self, contact_id):
        return [c for c in self.rows.values() if c.linked_id == contact_id]

    def save(self, contact):
        now = timezone.now()
        if contact.pk is None:
            contact.pk = self._next_id
            self._next_id += 1
            contact.created_at = contact.created_at or now
        contact.updated_at = now
        self.rows[contact.pk] = contact
        return contact

    def lock_identifiers(self, keys):
        self.locked.append(list(keys))


@pytest.fixture
def memory_store():
    return InMemoryContactStore()


@pytest.fixture
def make_contact(db):
    """Create a Contact; ``age`` (timedelta) backdates created_at."""

    def _make(email=None, phone_number=None, linked=None, age=None):
        contact = Contact.objects.create(
            email=email,
            phone_number=phone_number,
            linked=linked,
            link_precedence=(
                LinkPrecedence.SECONDARY if linked else LinkPrecedence.PRIMARY
            ),
        )
        if age is not None:
            Contact.objects.filter(pk=contact.pk).update(
                created_at=timezone.now() - age
            )
            contact.refresh_from_db()
        return contact

    return _make


@pytest.fixture
def primary(make_contact):
    """Primary contact with both identifiers."""
    return make_contact(
        email="lorraine@hillvalley.edu",
        phone_number="123456",
        age=timedelta(days=3),
    )


@pytest.fixture
def secondary(make_contact, primary):
    """Secondary linked to ``primary`` with a second email."""
    return make_contact(
        email="mcfly@hillvalley.edu",
        phone_number="123456",
        linked=primary,
        age=timedelta(days=2),
    )
