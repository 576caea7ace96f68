"""
Authentication views for myFlix.
Handles the credential exchange for a bearer token.
"""

import logging

from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework.exceptions import APIException
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from apps.users.serializers import UserSerializer
from core.exceptions import InvalidCredentialsException
from core.responses import APIResponse

from ..serializers import LoginSerializer
from ..services import login_user

logger = logging.getLogger(__name__)


class LoginView(APIView):
    """
    Login endpoint returning the user and a signed bearer token.
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = LoginSerializer

    @extend_schema(
        operation_id="auth_login",
        summary="Login",
        description=(
            "Exchange email and password for a bearer token. "
            "Unknown email and wrong password fail the same way."
        ),
        tags=["Auth"],
        request=LoginSerializer,
        responses={
            200: {
                "description": "Login successful",
                "example": {
                    "success": True,
                    "message": "You are successfully logged in",
                    "data": {
                        "user": {
                            "email": "jane@example.com",
                            "name": "Jane Doe",
                            "birthday": "1990-01-01",
                            "favorite_movies": [],
                            "to_watch": [],
                        },
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    },
                },
            },
            401: {"description": "Incorrect email or password"},
            422: {"description": "Missing email or password"},
        },
        examples=[
            OpenApiExample(
                "Login Request",
                value={"email": "jane@example.com", "password": "s3cret"},
                request_only=True,
            ),
        ],
    )
    def post(self, request):
        """Handle user login."""
        try:
            serializer = self.serializer_class(data=request.data)

            if not serializer.is_valid():
                return APIResponse.validation_error(
                    message=_("Login data is invalid"),
                    field_errors=serializer.errors,
                )

            result = login_user(
                email=serializer.validated_data["email"],
                password=serializer.validated_data["password"],
            )

            return APIResponse.login_success(
                user_data=UserSerializer(result["user"]).data,
                token=result["token"],
            )

        except InvalidCredentialsException as e:
            return APIResponse.from_exception(e)

        except APIException:
            raise

        except Exception as e:
            logger.error(f"Login error: {e}", exc_info=True)
            return APIResponse.server_error()
