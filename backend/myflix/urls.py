"""
Main project URL configuration.
"""
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    permission_classes,
)
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path

from core.exceptions import NotFoundException

ENDPOINTS = {
    "login": "/login",
    "movies": "/movies",
    "genres": "/genres/{name}",
    "directors": "/directors/{name}",
    "users": "/users",
    "favorites": "/lists/{email}/favorite/{movie_id}",
    "watch_list": "/lists/{email}/watch/{movie_id}",
}


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_root(request):
    """API root endpoint providing basic information and navigation."""
    return Response(
        {
            "success": True,
            "message": "Welcome to myFlix!",
            "data": {
                "documentation": {
                    "swagger": request.build_absolute_uri("/api/docs/"),
                    "redoc": request.build_absolute_uri("/api/redoc/"),
                    "schema": request.build_absolute_uri("/api/schema/"),
                },
                "endpoints": ENDPOINTS,
            },
        }
    )


# Custom 404 handler for API endpoints
def custom_404_view(request, exception=None):
    """Return the failure envelope for unknown routes."""
    exc = NotFoundException()
    return JsonResponse(
        {"success": False, "error": exc.get_full_details()}, status=exc.status_code
    )


urlpatterns = [
    # API Root
    path("", api_root, name="api-root"),
    # Django admin
    path("admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # API endpoints
    path("", include("api.urls")),
]

# Custom error handlers
handler404 = custom_404_view
