"""
Movie model - the catalog entry with its embedded genre and director.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.constants import ContentRating
from core.mixins.models import TimeStampedMixin, UUIDMixin
from core.validators import validate_director, validate_genre, validate_rating

from ..managers import MovieManager


class Movie(UUIDMixin, TimeStampedMixin):
    """
    Movie in the catalog.

    Genre and director are sub-documents stored on the movie itself:
    - genre: ``{"name", "description"}``
    - director: ``{"name", "bio", "birth", "death"}`` with ISO dates

    They are not entities of their own; genre and director lookups search
    movies by the embedded ``name`` key.
    """

    title = models.CharField(
        _("title"), max_length=255, db_index=True, help_text=_("Movie title")
    )

    description = models.TextField(
        _("description"), blank=True, help_text=_("Movie plot summary")
    )

    genre = models.JSONField(
        _("genre"),
        default=dict,
        blank=True,
        validators=[validate_genre],
        help_text=_("Embedded genre: name and description"),
    )

    director = models.JSONField(
        _("director"),
        default=dict,
        blank=True,
        validators=[validate_director],
        help_text=_("Embedded director: name, bio, birth and death dates"),
    )

    image_path = models.CharField(
        _("image path"),
        max_length=500,
        blank=True,
        help_text=_("Path or URL of the poster image"),
    )

    featured = models.BooleanField(
        _("featured"), default=False, help_text=_("Highlighted in the client")
    )

    release_year = models.PositiveSmallIntegerField(
        _("release year"), null=True, blank=True, help_text=_("Year of release")
    )

    mpa_rating = models.CharField(
        _("MPA rating"),
        max_length=10,
        choices=ContentRating.choices,
        blank=True,
        help_text=_("Content rating, e.g. PG-13"),
    )

    imdb_rating = models.FloatField(
        _("IMDb rating"),
        null=True,
        blank=True,
        validators=[validate_rating],
        help_text=_("IMDb rating on a 0-10 scale"),
    )

    actors = models.ManyToManyField(
        "movies.Actor",
        related_name="movies",
        blank=True,
        verbose_name=_("actors"),
        help_text=_("Actors appearing in the movie"),
    )

    objects = MovieManager()

    class Meta:
        db_table = "movies_movie"
        verbose_name = _("Movie")
        verbose_name_plural = _("Movies")
        ordering = ["title"]

    def __str__(self):
        if self.release_year:
            return f"{self.title} ({self.release_year})"
        return self.title
