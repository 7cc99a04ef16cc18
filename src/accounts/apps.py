"""App configuration for user accounts."""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Accounts app holds the custom User model and token issuance."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
