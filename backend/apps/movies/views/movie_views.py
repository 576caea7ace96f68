"""
Movie read endpoints.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import MovieNotFoundException
from core.responses import APIResponse

from ..serializers import MovieSerializer
from ..services import MovieService

logger = logging.getLogger(__name__)


class MovieListView(APIView):
    """
    List every movie in the catalog.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="movies_list",
        summary="List movies",
        description="Return all movies with their actors expanded.",
        responses={200: MovieSerializer(many=True)},
        tags=["Movie"],
    )
    def get(self, request) -> Response:
        """List all movies."""
        try:
            movies = MovieService.list_movies()
            data = MovieSerializer(movies, many=True).data

            return APIResponse.success(f"Retrieved {len(data)} movies", data)

        except Exception as e:
            logger.error(f"MovieListView error: {e}", exc_info=True)
            return APIResponse.server_error()


class MovieDetailView(APIView):
    """
    Get one movie by its exact title.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="movies_retrieve",
        summary="Get movie by title",
        parameters=[
            OpenApiParameter(
                "title",
                OpenApiTypes.STR,
                OpenApiParameter.PATH,
                description="Exact movie title (case sensitive)",
            ),
        ],
        responses={
            200: MovieSerializer,
            404: {"description": "No such movie"},
        },
        tags=["Movie"],
    )
    def get(self, request, title: str) -> Response:
        """Get movie by title."""
        try:
            movie = MovieService.get_by_title(title)
            return APIResponse.success(
                "Movie retrieved successfully", MovieSerializer(movie).data
            )

        except MovieNotFoundException as e:
            return APIResponse.from_exception(e)

        except Exception as e:
            logger.error(f"MovieDetailView error for {title!r}: {e}", exc_info=True)
            return APIResponse.server_error()
