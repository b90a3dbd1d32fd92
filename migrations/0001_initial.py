# Generated migration for Contact and IdentifierLock

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Contact",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "email",
                    models.TextField(
                        blank=True,
                        db_index=True,
                        null=True,
                        verbose_name="email",
                    ),
                ),
                (
                    "phone_number",
                    models.TextField(
                        blank=True,
                        db_index=True,
                        null=True,
                        verbose_name="phone number",
                    ),
                ),
                (
                    "link_precedence",
                    models.CharField(
                        choices=[("primary", "Primary"), ("secondary", "Secondary")],
                        db_index=True,
                        default="primary",
                        max_length=10,
                        verbose_name="link precedence",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="updated at"),
                ),
                (
                    "deleted_at",
                    models.DateTimeField(
                        blank=True, null=True, verbose_name="deleted at"
                    ),
                ),
                (
                    "linked",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="secondary_contacts",
                        to="linkman.contact",
                        verbose_name="linked contact",
                    ),
                ),
            ],
            options={
                "verbose_name": "contact",
                "verbose_name_plural": "contacts",
                "db_table": "linkman_contact",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["linked", "created_at"],
                        name="linkman_contact_linked_idx",
                    )
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("email__isnull", False),
                            ("phone_number__isnull", False),
                            _connector="OR",
                        ),
                        name="linkman_contact_has_identifier",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="IdentifierLock",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "key",
                    models.CharField(max_length=300, unique=True, verbose_name="key"),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "last_used_at",
                    models.DateTimeField(
                        db_index=True,
                        default=django.utils.timezone.now,
                        verbose_name="last used at",
                    ),
                ),
            ],
            options={
                "verbose_name": "identifier lock",
                "verbose_name_plural": "identifier locks",
                "db_table": "linkman_identifier_lock",
            },
        ),
    ]
