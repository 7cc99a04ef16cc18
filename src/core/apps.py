"""App configuration for the project-wide plumbing."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Settings, URLs, middleware, envelope and exception handling."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
