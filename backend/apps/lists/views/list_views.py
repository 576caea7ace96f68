"""
Favorites and watch-list API views.
"""

import logging
from uuid import UUID

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.serializers import UserSerializer
from core.permissions import IsAccountOwner
from core.responses import APIResponse

from ..services import ListService

logger = logging.getLogger(__name__)

LIST_PATH_PARAMETERS = [
    OpenApiParameter(
        "email", OpenApiTypes.EMAIL, OpenApiParameter.PATH, description="List owner"
    ),
    OpenApiParameter(
        "movie_id", OpenApiTypes.UUID, OpenApiParameter.PATH, description="Movie id"
    ),
]


class ListEntryView(APIView):
    """
    Add or remove one movie in the owner's favorites or watch-list.

    The list is picked by the ``list_type`` kwarg set in the URL conf.
    Both methods answer with the updated user.
    """

    permission_classes = [IsAuthenticated, IsAccountOwner]

    @extend_schema(
        summary="Add movie to list",
        description=(
            "Add a movie to the user's favorites or watch-list. "
            "Adding a movie already in the list leaves it unchanged."
        ),
        parameters=LIST_PATH_PARAMETERS,
        request=None,
        responses={200: UserSerializer, 401: None, 403: None},
        tags=["Lists"],
    )
    def post(self, request, email: str, movie_id: UUID, list_type: str) -> Response:
        try:
            user = ListService.add_movie(request.user, movie_id, list_type)
            return APIResponse.success(
                "Movie added to list successfully", UserSerializer(user).data
            )

        except Exception as e:
            logger.error(
                f"Failed to add {movie_id} to {list_type} list of {email}: {e}",
                exc_info=True,
            )
            return APIResponse.server_error()

    @extend_schema(
        summary="Remove movie from list",
        description=(
            "Remove a movie from the user's favorites or watch-list. "
            "Removing a movie that is not in the list is a no-op."
        ),
        parameters=LIST_PATH_PARAMETERS,
        responses={200: UserSerializer, 401: None, 403: None},
        tags=["Lists"],
    )
    def delete(self, request, email: str, movie_id: UUID, list_type: str) -> Response:
        try:
            user = ListService.remove_movie(request.user, movie_id, list_type)
            return APIResponse.success(
                "Movie removed from list successfully", UserSerializer(user).data
            )

        except Exception as e:
            logger.error(
                f"Failed to remove {movie_id} from {list_type} list of {email}: {e}",
                exc_info=True,
            )
            return APIResponse.server_error()
