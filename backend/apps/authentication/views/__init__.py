"""
Authentication Views Module
"""

from .auth_views import LoginView

__all__ = [
    "LoginView",
]
