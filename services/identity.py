"""Identity service - link contact submissions into clusters.

A cluster is one primary Contact plus every secondary linked to it.
resolve() runs its fetch-decide-mutate sequence in a single
transaction.atomic() block, holding the identifier locks of the
submission, so a merge is never left half-applied.
"""

import logging
from dataclasses import dataclass, field

from django.db import transaction

from linkman.conf import linkman_settings
from linkman.exceptions import ConsistencyError, LinkmanError, ValidationError
from linkman.gates import Gates
from linkman.models import Contact, IdentifierLock, LinkPrecedence
from linkman.protocols.store import ContactStore
from linkman.signals import contact_created, contact_demoted

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConsolidatedContact:
    """Canonical view of one cluster."""

    primary_contact_id: int
    emails: list[str] = field(default_factory=list)
    phone_numbers: list[str] = field(default_factory=list)
    secondary_contact_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Wire shape, as returned under the "contact" key."""
        return {
            "primaryContactId": self.primary_contact_id,
            "emails": list(self.emails),
            "phoneNumbers": list(self.phone_numbers),
            "secondaryContactIds": list(self.secondary_contact_ids),
        }


def default_store() -> ContactStore:
    from linkman.adapters.orm import DjangoContactStore

    return DjangoContactStore()


def identifier_keys(email: str | None, phone_number: str | None) -> list[str]:
    """Lock keys for a submission, in acquisition order."""
    keys = []
    if email:
        keys.append(IdentifierLock.key_for("email", email))
    if phone_number:
        keys.append(IdentifierLock.key_for("phone", phone_number))
    return sorted(keys)


def resolve(
    email: str | None = None,
    phone_number: str | None = None,
    store: ContactStore | None = None,
) -> ConsolidatedContact:
    """
    Resolve a submission to its cluster, merging and linking as needed.

    Args:
        email: Submitted email (None or "" when absent)
        phone_number: Submitted phone number (None or "" when absent)
        store: ContactStore to use (defaults to the Django ORM store)

    Returns:
        ConsolidatedContact for the resulting cluster

    Raises:
        ValidationError: Neither identifier was given (no store access)
        ConsistencyError: The chosen primary vanished before the final read
    """
    email = email or None
    phone_number = phone_number or None
    if not Gates.check_identifier_presence(email, phone_number):
        raise ValidationError("IDENTIFIER_REQUIRED")

    if store is None:
        store = default_store()

    events = []
    with transaction.atomic():
        if linkman_settings.IDENTIFIER_LOCKS:
            store.lock_identifiers(identifier_keys(email, phone_number))
        result = _resolve(store, email, phone_number, events)

    for signal, kwargs in events:
        signal.send(sender=Contact, **kwargs)
    return result


def _resolve(store, email, phone_number, events) -> ConsolidatedContact:
    seeds = store.find_by_email_or_phone(email, phone_number)
    cluster = expand_cluster(store, seeds)

    if not cluster:
        contact = store.save(
            Contact(
                email=email,
                phone_number=phone_number,
                link_precedence=LinkPrecedence.PRIMARY,
            )
        )
        events.append((contact_created, {"contact": contact}))
        logger.info("Created primary contact %s", contact.pk)
        return consolidate(contact, [])

    primaries = [c for c in cluster if c.is_primary]
    if primaries:
        chosen = primaries[0]
    else:
        logger.warning(
            "No primary among contacts %s, following links from %s",
            [c.pk for c in cluster],
            cluster[0].pk,
        )
        chosen = find_ultimate_primary(store, cluster[0])
        if not chosen.is_primary:
            _promote(store, chosen)

    repointed = set()
    for other in primaries[1:]:
        repointed |= _demote(store, other, chosen, events)

    # Chains reached through a secondary seed are collapsed onto the survivor
    for contact in cluster:
        if contact.pk == chosen.pk or contact.is_primary or contact.pk in repointed:
            continue
        if contact.linked_id != chosen.pk:
            contact.link_to(chosen)
            store.save(contact)

    if _has_new_information(cluster, email, phone_number):
        secondary = Contact(email=email, phone_number=phone_number)
        secondary.link_to(chosen)
        store.save(secondary)
        events.append((contact_created, {"contact": secondary}))
        logger.info("Linked new secondary %s to primary %s", secondary.pk, chosen.pk)

    primary = store.find_by_id(chosen.pk)
    if primary is None:
        raise ConsistencyError(
            "PRIMARY_NOT_FOUND", details={"contact_id": chosen.pk}
        )
    return consolidate(primary, store.find_by_linked_id(primary.pk))


def expand_cluster(store: ContactStore, seeds: list[Contact]) -> list[Contact]:
    """
    Every contact reachable from ``seeds``, deduplicated, oldest first.

    A primary seed contributes itself and its secondaries. A secondary seed
    contributes itself, its ultimate primary and that primary's secondaries.
    """
    found: dict[int, Contact] = {}
    for seed in seeds:
        found.setdefault(seed.pk, seed)
        primary = seed if seed.is_primary else find_ultimate_primary(store, seed)
        found.setdefault(primary.pk, primary)
        for secondary in store.find_by_linked_id(primary.pk):
            found.setdefault(secondary.pk, secondary)
    return sorted(found.values(), key=lambda c: c.seniority)


def find_ultimate_primary(
    store: ContactStore,
    contact: Contact,
    max_depth: int | None = None,
) -> Contact:
    """
    Follow linked_id from ``contact`` until a primary is reached.

    A missing parent or a chain longer than ``max_depth`` is logged and the
    last contact reached is returned.
    """
    if max_depth is None:
        max_depth = linkman_settings.MAX_LINK_DEPTH

    current = contact
    for _ in range(max_depth):
        if current.is_primary or current.linked_id is None:
            return current
        parent = store.find_by_id(current.linked_id)
        if parent is None:
            logger.warning(
                "Contact %s links to missing contact %s", current.pk, current.linked_id
            )
            return current
        current = parent

    if not current.is_primary:
        logger.warning(
            "Link chain from contact %s exceeds %s hops, stopping at %s",
            contact.pk,
            max_depth,
            current.pk,
        )
    return current


def view_cluster(contact_id: int, store: ContactStore | None = None) -> ConsolidatedContact:
    """Read-only consolidated view of the cluster containing ``contact_id``."""
    if store is None:
        store = default_store()

    contact = store.find_by_id(contact_id)
    if contact is None:
        raise LinkmanError("CONTACT_NOT_FOUND", details={"contact_id": contact_id})

    primary = find_ultimate_primary(store, contact)
    return consolidate(primary, store.find_by_linked_id(primary.pk))


def consolidate(primary: Contact, secondaries: list[Contact]) -> ConsolidatedContact:
    """Primary's own values first, then first-seen order over the secondaries."""
    members = [primary, *sorted(secondaries, key=lambda c: c.seniority)]
    return ConsolidatedContact(
        primary_contact_id=primary.pk,
        emails=_distinct(c.email for c in members),
        phone_numbers=_distinct(c.phone_number for c in members),
        secondary_contact_ids=sorted(c.pk for c in secondaries),
    )


def _distinct(values) -> list[str]:
    return list(dict.fromkeys(v for v in values if v))


def _has_new_information(cluster: list[Contact], email, phone_number) -> bool:
    emails = {c.email for c in cluster if c.email}
    phone_numbers = {c.phone_number for c in cluster if c.phone_number}

    is_new = (email and email not in emails) or (
        phone_number and phone_number not in phone_numbers
    )
    if not is_new:
        return False

    if email and phone_number:
        return not any(
            c.email == email and c.phone_number == phone_number for c in cluster
        )
    return True


def _demote(store, contact: Contact, primary: Contact, events) -> set[int]:
    """Turn ``contact`` into a secondary of ``primary``, taking its secondaries along."""
    secondaries = store.find_by_linked_id(contact.pk)

    contact.link_to(primary)
    store.save(contact)
    events.append((contact_demoted, {"contact": contact, "primary": primary}))

    for secondary in secondaries:
        secondary.linked_id = primary.pk
        store.save(secondary)

    logger.info(
        "Merged primary %s into %s (%d secondaries re-pointed)",
        contact.pk,
        primary.pk,
        len(secondaries),
    )
    return {contact.pk} | {s.pk for s in secondaries}


def _promote(store, contact: Contact) -> None:
    logger.warning(
        "Promoting contact %s to primary: its link %s does not resolve",
        contact.pk,
        contact.linked_id,
    )
    contact.link_precedence = LinkPrecedence.PRIMARY
    contact.linked_id = None
    store.save(contact)
