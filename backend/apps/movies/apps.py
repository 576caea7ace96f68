"""
Movies app configuration for myFlix.
"""

from django.apps import AppConfig


class MoviesConfig(AppConfig):
    """Configuration for the movies app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.movies"
    label = "movies"
    verbose_name = "Movies"
