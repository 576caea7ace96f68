"""
ListEntry model - one movie in one of a user's lists.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.constants import ListType
from core.mixins.models import TimeStampedMixin

from ..managers import ListEntryManager


class ListEntry(TimeStampedMixin):
    """
    Membership of a movie in a user's favorites or watch-list.

    A user's list is the set of its entries of one ``list_type`` in insertion
    order; the unique constraint keeps each list free of duplicates.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="list_entries",
        verbose_name=_("user"),
        help_text=_("Owner of the list"),
    )

    movie = models.ForeignKey(
        "movies.Movie",
        on_delete=models.CASCADE,
        related_name="list_entries",
        verbose_name=_("movie"),
        help_text=_("Movie in the list"),
    )

    list_type = models.CharField(
        _("list type"),
        max_length=20,
        choices=ListType.choices,
        help_text=_("Which list the movie belongs to"),
    )

    objects = ListEntryManager()

    class Meta:
        db_table = "lists_list_entry"
        verbose_name = _("List entry")
        verbose_name_plural = _("List entries")
        ordering = ["created_at", "id"]

        indexes = [
            models.Index(
                fields=["user", "list_type"], name="list_entry_user_type_idx"
            ),
        ]

        constraints = [
            models.UniqueConstraint(
                fields=["user", "movie", "list_type"],
                name="unique_user_movie_list_type",
            ),
        ]

    def __str__(self):
        return f"{self.user_id} {self.list_type}: {self.movie_id}"
