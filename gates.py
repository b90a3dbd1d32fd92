"""
Linkman Gates - Validation rules.

G1: IdentifierPresence - A submission carries an email or a phone number
G2: LinkPrecedence - Primaries link nowhere, secondaries link somewhere
G3: FlatLink - A secondary links straight to an existing primary
"""

from dataclasses import dataclass


class GateError(Exception):
    """Gate validation error."""

    def __init__(self, gate_name: str, message: str, details: dict | None = None):
        self.gate_name = gate_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{gate_name}] {message}")


@dataclass
class GateResult:
    """Result of a gate check."""

    passed: bool
    gate_name: str
    message: str = ""


# =============================================================================
# Gates
# =============================================================================


class Gates:
    """Linkman validation gates."""

    # =========================================================================
    # G1: Identifier Presence
    # =========================================================================

    @classmethod
    def identifier_presence(
        cls,
        email: str | None,
        phone_number: str | None,
    ) -> GateResult:
        """
        G1: At least one of email / phone_number is non-empty.

        Only presence is checked; values are never format-validated.

        Raises:
            GateError: If both are missing or empty
        """
        if not email and not phone_number:
            raise GateError(
                "G1_IdentifierPresence",
                "Email or phone number must be provided.",
            )

        return GateResult(True, "G1_IdentifierPresence")

    @classmethod
    def check_identifier_presence(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.identifier_presence(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G2: Link Precedence
    # =========================================================================

    @classmethod
    def link_precedence(cls, contact_id: int) -> GateResult:
        """
        G2: A primary has no linked_id, a secondary has one.

        Args:
            contact_id: Contact ID

        Raises:
            GateError: If precedence and link disagree
        """
        from linkman.models import Contact

        contact = Contact.objects.filter(pk=contact_id).first()
        if contact is None:
            raise GateError(
                "G2_LinkPrecedence",
                "Contact not found.",
                {"contact_id": contact_id},
            )

        if contact.is_primary and contact.linked_id is not None:
            raise GateError(
                "G2_LinkPrecedence",
                "Primary contact is linked to another contact.",
                {"contact_id": contact_id, "linked_id": contact.linked_id},
            )
        if not contact.is_primary and contact.linked_id is None:
            raise GateError(
                "G2_LinkPrecedence",
                "Secondary contact has no linked contact.",
                {"contact_id": contact_id},
            )

        return GateResult(True, "G2_LinkPrecedence")

    @classmethod
    def check_link_precedence(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.link_precedence(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G3: Flat Link
    # =========================================================================

    @classmethod
    def flat_link(cls, contact_id: int) -> GateResult:
        """
        G3: A secondary's linked contact exists and is a primary.

        Primaries pass trivially.

        Raises:
            GateError: If the link points at a secondary (a chain)
        """
        from linkman.models import Contact

        contact = Contact.objects.select_related("linked").filter(pk=contact_id).first()
        if contact is None:
            raise GateError(
                "G3_FlatLink",
                "Contact not found.",
                {"contact_id": contact_id},
            )

        if contact.is_primary or contact.linked is None:
            return GateResult(True, "G3_FlatLink")

        if not contact.linked.is_primary:
            raise GateError(
                "G3_FlatLink",
                "Secondary contact is linked to another secondary.",
                {
                    "contact_id": contact_id,
                    "linked_id": contact.linked_id,
                    "linked_to": contact.linked.linked_id,
                },
            )

        return GateResult(True, "G3_FlatLink")

    @classmethod
    def check_flat_link(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.flat_link(*args, **kwargs)
            return True
        except GateError:
            return False
