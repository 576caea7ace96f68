"""
User account views for myFlix.
Handles registration, lookup, update and deletion.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework.exceptions import APIException
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from core.exceptions import UserAlreadyExistsException, UserNotFoundException
from core.permissions import IsAccountOwner
from core.responses import APIResponse

from ..serializers import (
    UserAccountSerializer,
    UserCreateSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from ..services import UserService

logger = logging.getLogger(__name__)

EMAIL_PATH_PARAMETER = OpenApiParameter(
    "email", OpenApiTypes.EMAIL, OpenApiParameter.PATH, description="Account email"
)


class UserListCreateView(APIView):
    """
    List users (authenticated) or register a new one (open).
    """

    def _is_registration(self) -> bool:
        # Schema generation calls initialize_request before view.request is set
        request = getattr(self, "request", None)
        return request is not None and request.method == "POST"

    def get_authenticators(self):
        # Registration ignores any Authorization header the client sends
        if self._is_registration():
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self._is_registration():
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        operation_id="users_list",
        summary="List users",
        responses={200: UserSerializer(many=True)},
        tags=["User"],
    )
    def get(self, request) -> Response:
        try:
            users = UserService.list_users()
            data = UserSerializer(users, many=True).data

            return APIResponse.success(f"Retrieved {len(data)} users", data)

        except Exception as e:
            logger.error(f"UserListCreateView error: {e}", exc_info=True)
            return APIResponse.server_error()

    @extend_schema(
        operation_id="users_create",
        summary="Register",
        description="Create an account. The password is stored hashed.",
        request=UserCreateSerializer,
        responses={
            201: UserAccountSerializer,
            409: {"description": "User already exists"},
            422: {"description": "Invalid registration data"},
        },
        examples=[
            OpenApiExample(
                "Registration Request",
                value={
                    "email": "jane@example.com",
                    "name": "Jane Doe",
                    "password": "s3cret",
                    "birthday": "1990-01-01",
                },
                request_only=True,
            ),
        ],
        tags=["User"],
    )
    def post(self, request) -> Response:
        try:
            serializer = UserCreateSerializer(data=request.data)

            if not serializer.is_valid():
                return APIResponse.validation_error(
                    message=_("Registration data is invalid"),
                    field_errors=serializer.errors,
                )

            user = UserService.create_user(**serializer.validated_data)

            return APIResponse.created(
                _("User created successfully."), UserAccountSerializer(user).data
            )

        except UserAlreadyExistsException as e:
            return APIResponse.from_exception(e)

        except APIException:
            raise

        except Exception as e:
            logger.error(f"Registration error: {e}", exc_info=True)
            return APIResponse.server_error()


class UserDetailView(APIView):
    """
    Read any account; update or delete only your own.
    """

    def get_permissions(self):
        if self.request.method in ("PUT", "DELETE"):
            return [IsAuthenticated(), IsAccountOwner()]
        return [IsAuthenticated()]

    @extend_schema(
        operation_id="users_retrieve",
        summary="Get user by email",
        parameters=[EMAIL_PATH_PARAMETER],
        responses={200: UserSerializer, 404: {"description": "No such user"}},
        tags=["User"],
    )
    def get(self, request, email: str) -> Response:
        try:
            user = UserService.get_user(email)
            return APIResponse.success(
                "User retrieved successfully", UserSerializer(user).data
            )

        except UserNotFoundException as e:
            return APIResponse.from_exception(e)

        except Exception as e:
            logger.error(f"UserDetailView error for {email}: {e}", exc_info=True)
            return APIResponse.server_error()

    @extend_schema(
        operation_id="users_update",
        summary="Update account",
        description="Update name, password or birthday. The email cannot change.",
        parameters=[EMAIL_PATH_PARAMETER],
        request=UserUpdateSerializer,
        responses={
            200: UserAccountSerializer,
            403: {"description": "Not the account owner"},
            422: {"description": "Invalid update data"},
        },
        tags=["User"],
    )
    def put(self, request, email: str) -> Response:
        try:
            serializer = UserUpdateSerializer(data=request.data)

            if not serializer.is_valid():
                return APIResponse.validation_error(
                    message=_("Update data is invalid"),
                    field_errors=serializer.errors,
                )

            user = UserService.update_user(email, **serializer.validated_data)

            return APIResponse.success(
                _("User updated successfully."), UserAccountSerializer(user).data
            )

        except UserNotFoundException as e:
            return APIResponse.from_exception(e)

        except APIException:
            raise

        except Exception as e:
            logger.error(f"User update error for {email}: {e}", exc_info=True)
            return APIResponse.server_error()

    @extend_schema(
        operation_id="users_destroy",
        summary="Delete account",
        description="Delete the account together with its favorites and watch-list.",
        parameters=[EMAIL_PATH_PARAMETER],
        request=None,
        responses={200: None, 403: {"description": "Not the account owner"}},
        tags=["User"],
    )
    def delete(self, request, email: str) -> Response:
        try:
            UserService.delete_user(email)
            return APIResponse.success(_("User deleted successfully."), {})

        except UserNotFoundException as e:
            return APIResponse.from_exception(e)

        except Exception as e:
            logger.error(f"User delete error for {email}: {e}", exc_info=True)
            return APIResponse.server_error()
