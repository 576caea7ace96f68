"""
Business logic service for favorites and watch-list operations.
"""

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from ..models import ListEntry

# Type hints only
if TYPE_CHECKING:
    from apps.authentication.models import User
else:
    # Runtime imports
    from django.contrib.auth import get_user_model

    User = get_user_model()

logger = logging.getLogger(__name__)


class ListService:
    """
    Service class handling list membership.

    Every operation returns the user reloaded with both lists expanded.
    """

    @staticmethod
    def _reload(user: "User") -> "User":
        return User.objects.with_lists().get(pk=user.pk)

    @staticmethod
    def add_movie(user: "User", movie_id: UUID, list_type: str) -> "User":
        """
        Add a movie to one of the user's lists.

        The movie id is not checked up front; an unknown id fails in the store.
        """
        _, created = ListEntry.objects.add(user, movie_id, list_type)

        if created:
            logger.info(f"Movie {movie_id} added to {list_type} list of {user.email}")
        else:
            logger.debug(f"Movie {movie_id} already in {list_type} list of {user.email}")

        return ListService._reload(user)

    @staticmethod
    def remove_movie(user: "User", movie_id: UUID, list_type: str) -> "User":
        """Remove a movie from one of the user's lists."""
        deleted = ListEntry.objects.remove(user, movie_id, list_type)

        if deleted:
            logger.info(
                f"Movie {movie_id} removed from {list_type} list of {user.email}"
            )

        return ListService._reload(user)

