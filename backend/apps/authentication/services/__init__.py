"""
Authentication Services Base Module
"""

from .auth_service import (
    AuthenticationService,
    CredentialCheck,
    check_credentials,
    login_user,
)

__all__ = [
    "AuthenticationService",
    "CredentialCheck",
    "check_credentials",
    "login_user",
]
