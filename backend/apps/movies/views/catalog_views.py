"""
Genre and director lookups.

Both return the sub-document embedded in the first matching movie.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import DirectorNotFoundException, GenreNotFoundException
from core.responses import APIResponse

from ..serializers import DirectorSerializer, GenreSerializer
from ..services import MovieService

logger = logging.getLogger(__name__)


class GenreDetailView(APIView):
    """
    Get a genre by name.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="genres_retrieve",
        summary="Get genre by name",
        parameters=[
            OpenApiParameter(
                "name", OpenApiTypes.STR, OpenApiParameter.PATH, description="Genre name"
            ),
        ],
        responses={200: GenreSerializer, 404: {"description": "No such genre"}},
        tags=["Genre"],
    )
    def get(self, request, name: str) -> Response:
        try:
            genre = MovieService.find_genre(name)
            return APIResponse.success("Genre retrieved successfully", genre)

        except GenreNotFoundException as e:
            return APIResponse.from_exception(e)

        except Exception as e:
            logger.error(f"GenreDetailView error for {name!r}: {e}", exc_info=True)
            return APIResponse.server_error()


class DirectorDetailView(APIView):
    """
    Get a director by name.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="directors_retrieve",
        summary="Get director by name",
        parameters=[
            OpenApiParameter(
                "name",
                OpenApiTypes.STR,
                OpenApiParameter.PATH,
                description="Director name",
            ),
        ],
        responses={200: DirectorSerializer, 404: {"description": "No such director"}},
        tags=["Director"],
    )
    def get(self, request, name: str) -> Response:
        try:
            director = MovieService.find_director(name)
            return APIResponse.success("Director retrieved successfully", director)

        except DirectorNotFoundException as e:
            return APIResponse.from_exception(e)

        except Exception as e:
            logger.error(f"DirectorDetailView error for {name!r}: {e}", exc_info=True)
            return APIResponse.server_error()
