"""
User model for myFlix authentication.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.mixins import TimeStampedMixin

from ..managers import UserManager


class User(AbstractUser, TimeStampedMixin):
    """
    Custom user model using email as the unique identifier.

    Favorite and watch-list movies are kept as ``ListEntry`` rows
    (see ``apps.lists``) reachable through ``list_entries``.
    """

    # Remove the name fields from AbstractUser
    username = None
    first_name = None
    last_name = None

    # Primary authentication credential
    email = models.EmailField(
        _("email address"),
        max_length=254,
        unique=True,
        help_text=_("Required. User email address for authentication."),
    )

    name = models.CharField(
        _("name"),
        max_length=150,
        help_text=_("Display name."),
    )

    birthday = models.DateField(
        _("birthday"), blank=True, null=True, help_text=_("User birth date.")
    )

    # Use email as username field
    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects = UserManager()

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        db_table = "auth_user"
        ordering = ["email"]

    def __str__(self):
        return self.email

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.name
