"""
Project-wide constants and enums for consistent usage across the application.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

# ================================================================
# MOVIE CONSTANTS
# ================================================================


class ContentRating(models.TextChoices):
    """Movie content rating (MPA system)."""

    G = "G", _("General Audiences")
    PG = "PG", _("Parental Guidance Suggested")
    PG13 = "PG-13", _("Parents Strongly Cautioned")
    R = "R", _("Restricted")
    NC17 = "NC-17", _("Adults Only")
    NR = "NR", _("Not Rated")


# Keys allowed in the sub-documents embedded in a movie
GENRE_FIELDS = ("name", "description")
DIRECTOR_FIELDS = ("name", "bio", "birth", "death")
DIRECTOR_DATE_FIELDS = ("birth", "death")


# ================================================================
# USER LIST CONSTANTS
# ================================================================


class ListType(models.TextChoices):
    """Movie lists kept per user."""

    FAVORITE = "favorite", _("Favorite Movies")
    WATCH = "watch", _("To Watch")


# ================================================================
# ACCOUNT CONSTANTS
# ================================================================

NAME_MIN_LENGTH = 5


# ================================================================
# DATE & TIME FORMATS
# ================================================================


class DateTimeFormats:
    """Standard date and time formats."""

    DATE_FORMAT = "%Y-%m-%d"
