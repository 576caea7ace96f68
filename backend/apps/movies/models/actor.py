"""
Actor model - people credited in the catalog's movies.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.mixins.models import TimeStampedMixin, UUIDMixin


class Actor(UUIDMixin, TimeStampedMixin):
    """
    Actor referenced by movies. Never embedded; movies hold references.
    """

    name = models.CharField(
        _("name"), max_length=255, db_index=True, help_text=_("Actor name")
    )

    bio = models.TextField(_("bio"), blank=True, help_text=_("Short biography"))

    birthday = models.DateField(
        _("birthday"), null=True, blank=True, help_text=_("Actor birth date")
    )

    image_path = models.CharField(
        _("image path"),
        max_length=500,
        blank=True,
        help_text=_("Path or URL of the actor portrait"),
    )

    class Meta:
        db_table = "movies_actor"
        verbose_name = _("Actor")
        verbose_name_plural = _("Actors")
        ordering = ["name"]

    def __str__(self):
        return self.name
