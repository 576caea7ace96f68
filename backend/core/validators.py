"""
Custom validators for model fields and serializers.
"""

from datetime import datetime

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .constants import (
    DIRECTOR_DATE_FIELDS,
    DIRECTOR_FIELDS,
    GENRE_FIELDS,
    DateTimeFormats,
)


def _validate_embedded_document(value, allowed_fields, label: str) -> None:
    """
    Validate the shape of a sub-document stored inside a movie.

    Empty documents are allowed; a non-empty one needs a string ``name`` and
    may only use ``allowed_fields``.
    """
    if not isinstance(value, dict):
        raise ValidationError(
            _("%(label)s must be an object."),
            code="invalid_embedded_document",
            params={"label": label},
        )

    if not value:
        return

    unknown = sorted(set(value) - set(allowed_fields))
    if unknown:
        raise ValidationError(
            _("%(label)s has unknown fields: %(fields)s."),
            code="unknown_embedded_fields",
            params={"label": label, "fields": ", ".join(unknown)},
        )

    name = value.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(
            _("%(label)s name is required."),
            code="embedded_name_required",
            params={"label": label},
        )


def validate_genre(value) -> None:
    """
    Validate the genre sub-document: ``{"name": str, "description": str}``.

    Raises:
        ValidationError: If the document is malformed
    """
    _validate_embedded_document(value, GENRE_FIELDS, "Genre")


def validate_director(value) -> None:
    """
    Validate the director sub-document.

    Shape: ``{"name": str, "bio": str, "birth": "YYYY-MM-DD", "death": "YYYY-MM-DD"}``
    where the dates are optional and may be null.

    Raises:
        ValidationError: If the document is malformed
    """
    _validate_embedded_document(value, DIRECTOR_FIELDS, "Director")

    for field in DIRECTOR_DATE_FIELDS:
        date_value = value.get(field)
        if date_value is None:
            continue
        try:
            datetime.strptime(str(date_value), DateTimeFormats.DATE_FORMAT)
        except ValueError:
            raise ValidationError(
                _("Director %(field)s must be a date in YYYY-MM-DD format."),
                code="invalid_director_date",
                params={"field": field},
            )


def validate_rating(value) -> None:
    """Validate an IMDb style rating on the 0-10 scale."""
    if value is not None and not 0 <= value <= 10:
        raise ValidationError(
            _("Rating must be between 0 and 10."), code="invalid_rating"
        )
