"""Linkman admin."""

from django.contrib import admin

from linkman.models import Contact, IdentifierLock
from linkman.services import identity


# ===========================================
# Inline Classes (must be defined before ContactAdmin)
# ===========================================


class SecondaryContactInline(admin.TabularInline):
    model = Contact
    fk_name = "linked"
    extra = 0
    fields = ["email", "phone_number", "link_precedence", "created_at"]
    readonly_fields = ["email", "phone_number", "link_precedence", "created_at"]
    verbose_name_plural = "Secondary contacts"

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# ===========================================
# Contact Admin
# ===========================================


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "email",
        "phone_number",
        "link_precedence",
        "linked",
        "created_at",
    ]
    list_filter = ["link_precedence"]
    search_fields = ["email", "phone_number"]
    raw_id_fields = ["linked"]
    readonly_fields = ["created_at", "updated_at", "cluster_summary"]
    inlines = [SecondaryContactInline]

    fieldsets = [
        ("Identifiers", {"fields": ["email", "phone_number"]}),
        ("Linking", {"fields": ["link_precedence", "linked", "cluster_summary"]}),
        (
            "System",
            {
                "fields": ["created_at", "updated_at", "deleted_at"],
                "classes": ["collapse"],
            },
        ),
    ]

    def cluster_summary(self, obj):
        if not obj.pk:
            return "-"
        view = identity.view_cluster(obj.pk)
        return (
            f"primary #{view.primary_contact_id}, "
            f"{len(view.secondary_contact_ids)} secondaries, "
            f"emails: {', '.join(view.emails) or '-'}, "
            f"phones: {', '.join(view.phone_numbers) or '-'}"
        )

    cluster_summary.short_description = "Cluster"


@admin.register(IdentifierLock)
class IdentifierLockAdmin(admin.ModelAdmin):
    list_display = ["key", "created_at", "last_used_at"]
    search_fields = ["key"]
    readonly_fields = ["key", "created_at", "last_used_at"]
