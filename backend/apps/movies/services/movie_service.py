"""
Movie Service - catalog reads for movies, genres and directors.
"""

import logging
from typing import Dict

from django.db.models import QuerySet

from core.exceptions import (
    DirectorNotFoundException,
    GenreNotFoundException,
    MovieNotFoundException,
)

from ..models import Movie

logger = logging.getLogger(__name__)


class MovieService:
    """
    Service class for catalog reads.

    Genres and directors are not stored on their own: they are found by
    searching movies on the embedded document's ``name``.
    """

    @staticmethod
    def list_movies() -> QuerySet:
        """All movies with their actors loaded."""
        return Movie.objects.with_actors()

    @staticmethod
    def get_by_title(title: str) -> Movie:
        """
        Get one movie by exact title.

        Raises:
            MovieNotFoundException: If no movie has that title
        """
        try:
            return Movie.objects.get_by_title(title)
        except Movie.DoesNotExist:
            logger.info(f"Movie not found: {title!r}")
            raise MovieNotFoundException()

    @staticmethod
    def find_genre(name: str) -> Dict:
        """
        Genre sub-document of the first movie in genre ``name``.

        Raises:
            GenreNotFoundException: If no movie carries that genre
        """
        genre = Movie.objects.find_genre(name)
        if genre is None:
            logger.info(f"Genre not found: {name!r}")
            raise GenreNotFoundException()
        return genre

    @staticmethod
    def find_director(name: str) -> Dict:
        """
        Director sub-document of the first movie directed by ``name``.

        Raises:
            DirectorNotFoundException: If no movie carries that director
        """
        director = Movie.objects.find_director(name)
        if director is None:
            logger.info(f"Director not found: {name!r}")
            raise DirectorNotFoundException()
        return director
