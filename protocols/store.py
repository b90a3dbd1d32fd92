"""Contact store protocol."""

from typing import TYPE_CHECKING, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from linkman.models import Contact


@runtime_checkable
class ContactStore(Protocol):
    """
    Protocol for the persistence layer used by identity resolution.

    The resolver never touches the ORM directly; everything goes through
    one of these methods so an alternative backend can be injected.
    """

    def find_by_email_or_phone(
        self, email: str | None, phone_number: str | None
    ) -> list["Contact"]:
        """Contacts whose email equals ``email`` OR phone equals ``phone_number``."""
        ...

    def find_by_id(self, contact_id: int) -> "Contact | None":
        """Single contact by id, or None."""
        ...

    def find_by_linked_id(self, contact_id: int) -> list["Contact"]:
        """Contacts whose linked_id is ``contact_id``, oldest first."""
        ...

    def save(self, contact: "Contact") -> "Contact":
        """Insert (no pk) or update; refreshes updated_at."""
        ...

    def lock_identifiers(self, keys: Iterable[str]) -> None:
        """
        Hold an exclusive lock on every key until the current transaction ends.

        Keys look like ``email:<value>`` or ``phone:<value>``.
        """
        ...
