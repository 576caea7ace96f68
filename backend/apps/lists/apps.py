"""
Lists app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ListsConfig(AppConfig):
    """
    Configuration for the Lists app.

    Handles users' favorite movies and watch-list.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.lists"
    label = "lists"
    verbose_name = _("Lists")
