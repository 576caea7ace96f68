"""
Favorites and watch-list API endpoints.
"""

from django.urls import path

from apps.lists.views import ListEntryView
from core.constants import ListType

app_name = "lists"

urlpatterns = [
    path(
        "lists/<str:email>/favorite/<uuid:movie_id>",
        ListEntryView.as_view(),
        {"list_type": ListType.FAVORITE},
        name="favorite",
    ),
    path(
        "lists/<str:email>/watch/<uuid:movie_id>",
        ListEntryView.as_view(),
        {"list_type": ListType.WATCH},
        name="watch",
    ),
]
