"""
Main URL routing for the API.
Every area is mounted at the site root.
"""
from django.urls import include, path

urlpatterns = [
    # Login
    path("", include("api.authentication.urls")),
    # Movies, genres and directors
    path("", include("api.movies.urls")),
    # User accounts
    path("", include("api.users.urls")),
    # Favorites and watch-list
    path("", include("api.lists.urls")),
]
