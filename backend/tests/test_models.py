"""Tests for the embedded document validators and catalog models."""
import pytest

from django.core.exceptions import ValidationError

from apps.movies.models import Movie
from core.validators import validate_director, validate_genre, validate_rating

from .data import DEMME, THRILLER


class TestGenreValidator:
    def test_accepts_genre_and_empty_document(self):
        validate_genre(THRILLER)
        validate_genre({})

    @pytest.mark.parametrize(
        "value",
        [
            "Thriller",
            {"description": "no name"},
            {"name": "  "},
            {"name": "Thriller", "rating": 5},
        ],
    )
    def test_rejects(self, value):
        with pytest.raises(ValidationError):
            validate_genre(value)


class TestDirectorValidator:
    def test_accepts_director(self):
        validate_director(DEMME)
        validate_director({"name": "Someone", "death": None})

    @pytest.mark.parametrize("field", ["birth", "death"])
    def test_rejects_bad_dates(self, field):
        with pytest.raises(ValidationError):
            validate_director({"name": "Someone", field: "22/02/1944"})


@pytest.mark.parametrize("value", [-0.1, 10.1])
def test_rating_out_of_range(value):
    with pytest.raises(ValidationError):
        validate_rating(value)


@pytest.mark.parametrize("value", [None, 0, 7.5, 10])
def test_rating_in_range(value):
    validate_rating(value)


@pytest.mark.django_db
class TestMovieModel:
    def test_full_clean_validates_embedded_documents(self):
        movie = Movie(title="Broken", genre={"label": "Thriller"})

        with pytest.raises(ValidationError) as excinfo:
            movie.full_clean()

        assert "genre" in excinfo.value.message_dict

    def test_embedded_lookups(self, lambs):
        assert Movie.objects.find_genre("Thriller") == THRILLER
        assert Movie.objects.find_director("Jonathan Demme") == DEMME
        assert Movie.objects.find_genre("Western") is None

    def test_str(self, lambs):
        assert str(lambs) == "The Silence of the Lambs (1991)"
