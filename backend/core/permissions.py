"""
Custom permission classes for the myFlix API.
"""

import logging

from rest_framework import permissions
from rest_framework.request import Request
from rest_framework.views import View

from .exceptions import PermissionException

logger = logging.getLogger(__name__)


class BasePermission(permissions.BasePermission):
    """
    Base permission class with logging of denials.
    """

    def log_permission_denied(self, request: Request, reason: str):
        """Log permission denial for security monitoring."""
        user_info = (
            f"User: {request.user.email if request.user.is_authenticated else 'Anonymous'}"
        )
        logger.warning(
            f"Permission denied - {reason} | {user_info} | Path: {request.path}"
        )


class IsAccountOwner(BasePermission):
    """
    Allows access only when the authenticated identity owns the account
    addressed by the ``email`` URL parameter.

    Must follow ``IsAuthenticated`` so anonymous callers get a 401 instead.

    Usage:
        permission_classes = [IsAuthenticated, IsAccountOwner]
    """

    message = "Permission denied"

    def has_permission(self, request: Request, view: View) -> bool:
        if not request.user or not request.user.is_authenticated:
            return False

        if request.user.email != view.kwargs.get("email"):
            self.log_permission_denied(
                request, "User attempted to modify another account"
            )
            raise PermissionException(self.message)

        return True
