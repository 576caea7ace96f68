"""
Custom exception classes for consistent error handling across the application.
"""
import logging
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class BaseAPIException(APIException):
    """Base exception class for all custom API exceptions."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("An unexpected error occurred.")
    default_code = "internal_error"

    def __init__(
        self,
        detail: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        extra_data: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the exception with optional overrides

        Args:
            detail: Custom error message
            code: Custom error code
            status_code: Custom HTTP status code
            extra_data: Additional data to include in error response
        """
        if status_code:
            self.status_code = status_code

        if detail is None:
            detail = self.default_detail

        if code is None:
            code = self.default_code

        self.extra_data = extra_data or {}

        super().__init__(detail, code)

    def get_full_details(self) -> Dict[str, Any]:
        """
        Return the error body used in the failure envelope.

        Returns:
            Dictionary containing the status code, message and extra data
        """
        details = {
            "code": self.status_code,
            "message": str(self.detail),
        }

        if self.extra_data:
            details.update(self.extra_data)

        return details

    def __str__(self) -> str:
        """Return a readable string representation of the exception."""
        base_msg = f"[{self.status_code}] {self.default_code}: {self.detail}"
        if self.extra_data:
            return f"{base_msg} | Extra data: {self.extra_data}"
        return base_msg


# =============================================================================
# CLIENT ERROR EXCEPTIONS (4xx)
# =============================================================================


class ClientErrorException(BaseAPIException):
    """Base class for all client error exceptions (4xx status codes)."""

    pass


# 422 Unprocessable Entity
class ValidationException(ClientErrorException):
    """Raised when request data validation fails."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = _("The provided data failed validation.")
    default_code = "validation_error"

    def __init__(self, field_errors: Optional[Dict[str, Any]] = None, **kwargs):
        """
        Initialize with optional field-specific errors.

        Args:
            field_errors: Dictionary of field names to error messages
        """
        self.field_errors = field_errors or {}
        if field_errors:
            kwargs["extra_data"] = {"fields": field_errors}
        super().__init__(**kwargs)


# 401 Unauthorized
class AuthenticationException(ClientErrorException):
    """Base class for authentication-related exceptions."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = _("Authentication credentials were not provided or are invalid.")
    default_code = "authentication_failed"


class InvalidCredentialsException(AuthenticationException):
    """Raised when provided credentials are invalid."""

    default_detail = _("Incorrect email or password.")
    default_code = "invalid_credentials"


# 403 Forbidden
class PermissionException(ClientErrorException):
    """Raised when the caller does not own the addressed resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _("Permission denied")
    default_code = "permission_denied"


# 404 Not Found
class ResourceException(ClientErrorException):
    """Base class for resource-related exceptions."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _("The requested resource was not found.")
    default_code = "resource_not_found"


class NotFoundException(ResourceException):
    """Raised for routes that match nothing."""

    default_detail = _("Not Found.")


class UserNotFoundException(ResourceException):
    default_detail = _("No such user")
    default_code = "user_not_found"


class MovieNotFoundException(ResourceException):
    default_detail = _("No such movie")
    default_code = "movie_not_found"


class GenreNotFoundException(ResourceException):
    default_detail = _("No such genre")
    default_code = "genre_not_found"


class DirectorNotFoundException(ResourceException):
    default_detail = _("No such director")
    default_code = "director_not_found"


# 409 Conflict
class AlreadyExistsException(ClientErrorException):
    """Raised when creating a resource whose unique key is taken."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = _("Resource already exists.")
    default_code = "already_exists"


class UserAlreadyExistsException(AlreadyExistsException):
    default_detail = _("User already exists.")
    default_code = "user_already_exists"


# =============================================================================
# SERVER ERROR EXCEPTIONS (5xx)
# =============================================================================


class ApplicationException(BaseAPIException):
    """Raised when an unexpected or store failure prevents a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("Something broke!")
    default_code = "application_error"


# =============================================================================
# DRF EXCEPTION HANDLER
# =============================================================================


def api_exception_handler(exc, context):
    """
    Render every exception reaching DRF into the failure envelope.

    Authentication and permission failures are raised before the view body
    runs, so they never pass through the views' own error handling.
    """
    from .responses import APIResponse

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}"
        )
        return APIResponse.server_error()

    if isinstance(exc, BaseAPIException):
        message, extra = str(exc.detail), exc.extra_data
    elif isinstance(response.data, dict) and "detail" in response.data:
        message, extra = str(response.data["detail"]), {}
    else:
        message, extra = _("Invalid request."), {"fields": response.data}

    envelope = APIResponse.error(
        message=message, status_code=response.status_code, **extra
    )

    # Keep the challenge and throttling headers DRF attached
    for header in ("WWW-Authenticate", "Retry-After"):
        if header in response:
            envelope[header] = response[header]

    return envelope
