"""
Contact model - one observed identity submission.

Data architecture:
    A cluster is one primary Contact plus every secondary whose ``linked``
    points at it. Secondaries always point straight at a primary; chains
    are collapsed whenever clusters merge.

    Seniority is ``(created_at, id)``. The oldest primary of a cluster
    survives every merge.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class LinkPrecedence(models.TextChoices):
    PRIMARY = "primary", _("Primary")
    SECONDARY = "secondary", _("Secondary")


class Contact(models.Model):
    """
    Contact submission.

    email/phone_number are stored exactly as submitted; at least one is set.
    ``deleted_at`` is reserved for soft-deletion and is never written by
    the resolver.
    """

    email = models.TextField(
        _("email"),
        null=True,
        blank=True,
        db_index=True,
    )
    phone_number = models.TextField(
        _("phone number"),
        null=True,
        blank=True,
        db_index=True,
    )

    # Link to the primary of the cluster (secondaries only)
    linked = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="secondary_contacts",
        verbose_name=_("linked contact"),
    )
    link_precedence = models.CharField(
        _("link precedence"),
        max_length=10,
        choices=LinkPrecedence.choices,
        default=LinkPrecedence.PRIMARY,
        db_index=True,
    )

    # Timestamps
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)
    deleted_at = models.DateTimeField(_("deleted at"), null=True, blank=True)

    class Meta:
        db_table = "linkman_contact"
        verbose_name = _("contact")
        verbose_name_plural = _("contacts")
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(email__isnull=False)
                    | models.Q(phone_number__isnull=False)
                ),
                name="linkman_contact_has_identifier",
            ),
        ]
        indexes = [
            models.Index(
                fields=["linked", "created_at"], name="linkman_contact_linked_idx"
            ),
        ]

    def __str__(self):
        label = self.email or self.phone_number
        if self.is_primary:
            return f"#{self.pk} {label} [primary]"
        return f"#{self.pk} {label} -> #{self.linked_id}"

    @property
    def is_primary(self) -> bool:
        return self.link_precedence == LinkPrecedence.PRIMARY

    @property
    def seniority(self) -> tuple:
        """Sort key: oldest first, id breaks timestamp ties."""
        return (self.created_at, self.pk)

    def link_to(self, primary: "Contact") -> None:
        """Point this contact at ``primary`` as a secondary (unsaved)."""
        self.link_precedence = LinkPrecedence.SECONDARY
        self.linked_id = primary.pk
