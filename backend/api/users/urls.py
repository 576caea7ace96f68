"""
User account API endpoints.
"""

from django.urls import path

from apps.users.views import UserDetailView, UserListCreateView

app_name = "users"

urlpatterns = [
    path("users", UserListCreateView.as_view(), name="list"),
    path("users/<str:email>", UserDetailView.as_view(), name="detail"),
]
