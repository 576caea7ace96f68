"""
User Views Module
"""

from .user_views import UserDetailView, UserListCreateView

__all__ = [
    "UserListCreateView",
    "UserDetailView",
]
