"""
API response handlers for consistent response formatting.
Provides standardized success and error responses across all API endpoints.
"""

from typing import TYPE_CHECKING, Any, Dict

from rest_framework import status
from rest_framework.response import Response

if TYPE_CHECKING:
    from .exceptions import BaseAPIException


class APIResponse:
    """
    API response handler with consistent formatting.

    Success bodies look like ``{"success": true, "message": ..., "data": ...}``
    and failures like ``{"success": false, "error": {"code": ..., "message": ...}}``.

    Usage:
        # Success responses
        return APIResponse.success("Movies retrieved successfully", movies)
        return APIResponse.created("User created successfully.", user_data)

        # Error responses
        return APIResponse.from_exception(MovieNotFoundException())
        return APIResponse.validation_error("Validation failed", {"name": ["Required"]})
    """

    # ================================================================
    # SUCCESS RESPONSES
    # ================================================================

    @staticmethod
    def success(
        message: str = "Operation successful",
        data: Any = None,
        status_code: int = status.HTTP_200_OK,
    ) -> Response:
        """
        Standard success response.

        Args:
            message: Success message
            data: Response data, omitted from the body when None
            status_code: HTTP status code (default: 200)

        Returns:
            Success Response
        """
        response_data = {"success": True, "message": str(message)}

        if data is not None:
            response_data["data"] = data

        return Response(response_data, status=status_code)

    @staticmethod
    def created(
        message: str = "Resource created successfully", data: Any = None
    ) -> Response:
        """Resource creation success response (201)."""
        return APIResponse.success(
            message=message, data=data, status_code=status.HTTP_201_CREATED
        )

    @staticmethod
    def login_success(
        user_data: Dict, token: str, message: str = "You are successfully logged in"
    ) -> Response:
        """
        Login success response with the sanitized user and the bearer token.

        Args:
            user_data: Serialized user, without password
            token: Signed bearer token
            message: Login success message

        Returns:
            Login Success Response
        """
        return APIResponse.success(
            message=message, data={"user": user_data, "token": token}
        )

    # ================================================================
    # ERROR RESPONSES
    # ================================================================

    @staticmethod
    def error(
        message: str = "An error occurred",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        **extra_fields,
    ) -> Response:
        """
        Standard error response.

        Args:
            message: Error message
            status_code: HTTP status code (default: 400)
            **extra_fields: Additional members of the ``error`` object

        Returns:
            Error Response
        """
        error = {"code": status_code, "message": str(message)}
        error.update(extra_fields)

        return Response({"success": False, "error": error}, status=status_code)

    @staticmethod
    def from_exception(exc: "BaseAPIException") -> Response:
        """Build an error response from one of the project exceptions."""
        details = exc.get_full_details()
        code = details.pop("code")
        message = details.pop("message")
        return APIResponse.error(message=message, status_code=code, **details)

    @staticmethod
    def validation_error(
        message: str = "Validation failed", field_errors: Dict = None
    ) -> Response:
        """
        Validation error response (422).

        Args:
            message: Validation error message
            field_errors: Field-specific validation errors

        Returns:
            422 Unprocessable Entity Response
        """
        from .exceptions import ValidationException

        return APIResponse.from_exception(
            ValidationException(detail=message, field_errors=field_errors)
        )

    @staticmethod
    def server_error(message: str = "Something broke!") -> Response:
        """
        Server error response (500).

        The message never carries internal details; those go to the log.
        """
        from .exceptions import ApplicationException

        return APIResponse.from_exception(ApplicationException(detail=message))
