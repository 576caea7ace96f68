from .user import (
    UserAccountSerializer,
    UserCreateSerializer,
    UserSerializer,
    UserUpdateSerializer,
)

__all__ = [
    # User Serializers
    "UserSerializer",
    "UserAccountSerializer",
    "UserCreateSerializer",
    "UserUpdateSerializer",
]
