"""
Linkman public API.

CORE (essential):
    IdentityService.identify(email, phone_number) - Resolve a submission

CONVENIENCE (helpers):
    IdentityService.cluster(contact_id) - View an existing cluster
"""

from linkman.protocols.store import ContactStore
from linkman.services import identity
from linkman.services.identity import ConsolidatedContact


class IdentityService:
    """
    Linkman public API.

    Uses @classmethod for extensibility: override get_store() to plug in
    another ContactStore.

    CORE (essential):
        identify(email, phone_number) - Resolve, merge, link, report

    CONVENIENCE (helpers):
        cluster(contact_id)           - Consolidated view, no writes
    """

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def identify(
        cls,
        email: str | None = None,
        phone_number: str | None = None,
    ) -> ConsolidatedContact:
        """
        Resolve a contact submission.

        Args:
            email: Email address (optional)
            phone_number: Phone number (optional)

        Returns:
            ConsolidatedContact for the cluster the submission belongs to

        Raises:
            ValidationError: If neither email nor phone_number is given
        """
        return identity.resolve(email, phone_number, store=cls.get_store())

    # ======================================================================
    # CONVENIENCE API
    # ======================================================================

    @classmethod
    def cluster(cls, contact_id: int) -> ConsolidatedContact:
        """
        Consolidated view of the cluster containing a contact.

        Raises:
            LinkmanError: CONTACT_NOT_FOUND
        """
        return identity.view_cluster(contact_id, store=cls.get_store())

    @classmethod
    def get_store(cls) -> ContactStore:
        """Internal: store used by every call. Override for other backends."""
        return identity.default_store()
