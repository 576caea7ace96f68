"""
Custom managers for the Movie model.
"""

from django.db import models


class MovieQuerySet(models.QuerySet):
    """Query helpers for the catalog."""

    def with_actors(self):
        return self.prefetch_related("actors")

    def by_title(self, title):
        """Exact, case-sensitive title match."""
        return self.filter(title=title)

    def by_genre_name(self, name):
        return self.filter(genre__name=name)

    def by_director_name(self, name):
        return self.filter(director__name=name)


class MovieManager(models.Manager.from_queryset(MovieQuerySet)):
    """
    Custom manager for Movie model with specialized query methods.
    """

    def get_by_title(self, title):
        """
        Get the first movie whose title equals ``title``.

        Raises:
            Movie.DoesNotExist: If no movie has that title
        """
        movie = self.with_actors().by_title(title).first()
        if movie is None:
            raise self.model.DoesNotExist(f"No movie titled {title!r}")
        return movie

    def find_genre(self, name):
        """Embedded genre document of the first movie in that genre, or None."""
        return self.by_genre_name(name).values_list("genre", flat=True).first()

    def find_director(self, name):
        """Embedded director document of the first movie by them, or None."""
        return self.by_director_name(name).values_list("director", flat=True).first()
