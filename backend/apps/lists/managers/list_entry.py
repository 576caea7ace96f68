"""
Custom manager for ListEntry models.
"""

from django.db import models
from django.db.models import Prefetch


class ListEntryManager(models.Manager):
    """
    Set operations over a user's movie lists.
    """

    def add(self, user, movie_id, list_type):
        """
        Put the movie in the list. Adding an existing member is a no-op.

        Returns:
            Tuple of (entry, created)
        """
        return self.get_or_create(user=user, movie_id=movie_id, list_type=list_type)

    def remove(self, user, movie_id, list_type):
        """
        Take the movie out of the list. Removing a non-member is a no-op.

        Returns:
            Number of entries deleted (0 or 1)
        """
        deleted, _ = self.filter(
            user=user, movie_id=movie_id, list_type=list_type
        ).delete()
        return deleted

    def prefetch_for_users(self):
        """Prefetch loading every user's entries and their movies in list order."""
        return Prefetch(
            "list_entries",
            queryset=self.select_related("movie").order_by("created_at", "id"),
        )
