"""
Core app configuration for myFlix.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the core app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Core"

    def ready(self):
        """Register the OpenAPI extension for the bearer token gate."""
        from . import schema  # noqa: F401
