from django.apps import AppConfig


class LinkmanConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "linkman"
    verbose_name = "Linkman - Identity Reconciliation"
