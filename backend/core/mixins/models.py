"""
Abstract model bases shared by the myFlix apps.

Users and list entries carry timestamps; movies and actors also use UUID
keys, which is what the list routes accept as a movie id.
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class TimeStampedMixin(models.Model):
    """
    Creation and last update times.

    ``created_at`` is indexed; list entries are ordered by it.
    """

    created_at = models.DateTimeField(
        _("created at"),
        auto_now_add=True,
        db_index=True,
        help_text=_("Date and time when the record was created"),
    )
    updated_at = models.DateTimeField(
        _("updated at"),
        auto_now=True,
        help_text=_("Date and time when the record was last updated"),
    )

    class Meta:
        abstract = True


class UUIDMixin(models.Model):
    """Random UUID primary key assigned when the record is created."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text=_("Random identifier used in URLs"),
    )

    class Meta:
        abstract = True
