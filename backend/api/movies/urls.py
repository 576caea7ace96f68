"""
Movies API endpoints.
Handles the movie catalog and the genre and director lookups.
"""

from django.urls import path

from apps.movies.views import (
    DirectorDetailView,
    GenreDetailView,
    MovieDetailView,
    MovieListView,
)

app_name = "movies"

urlpatterns = [
    path("movies", MovieListView.as_view(), name="list"),
    path("movies/<path:title>", MovieDetailView.as_view(), name="detail"),
    path("genres/<path:name>", GenreDetailView.as_view(), name="genre-detail"),
    path("directors/<path:name>", DirectorDetailView.as_view(), name="director-detail"),
]
