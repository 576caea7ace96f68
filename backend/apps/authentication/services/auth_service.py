"""
Authentication services for myFlix.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from rest_framework_simplejwt.tokens import AccessToken

from django.utils.translation import gettext_lazy as _

from core.exceptions import InvalidCredentialsException

from ..passwords import hash_password, verify_password

# Type hints only (not runtime imports)
if TYPE_CHECKING:
    from ..models import User
else:
    # Runtime imports
    from django.contrib.auth import get_user_model

    User = get_user_model()

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialCheck:
    """
    Outcome of checking an email/password pair.

    Either ``user`` is set, or ``failure`` names what went wrong
    (``unknown_email`` or ``wrong_password``). The failure name is for the
    server log only and never reaches the client.
    """

    user: Optional["User"] = None
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.user is not None


class AuthenticationService:
    """
    Authentication service for myFlix.
    Handles credential checks, login and bearer token issuance.
    """

    UNKNOWN_EMAIL = "unknown_email"
    WRONG_PASSWORD = "wrong_password"

    @staticmethod
    def check_credentials(email: str, password: str) -> CredentialCheck:
        """
        Look up the account and verify the password against its hash.

        Args:
            email: Account email
            password: Plaintext candidate

        Returns:
            CredentialCheck tagged result
        """
        email = User.objects.normalize_email(email.strip())

        try:
            user = User.objects.get_by_email(email)
        except User.DoesNotExist:
            # Hash anyway so the response time does not reveal unknown emails
            hash_password(password)
            return CredentialCheck(failure=AuthenticationService.UNKNOWN_EMAIL)

        if not verify_password(user, password):
            return CredentialCheck(failure=AuthenticationService.WRONG_PASSWORD)

        return CredentialCheck(user=user)

    @staticmethod
    def issue_token(user: "User") -> str:
        """
        Issue a signed bearer token whose subject is the user's email.

        Lifetime and algorithm come from the ``SIMPLE_JWT`` settings.
        """
        token = AccessToken.for_user(user)
        logger.debug(f"Bearer token issued for {user.email}")
        return str(token)

    @staticmethod
    def login(email: str, password: str) -> Dict:
        """
        Exchange credentials for a bearer token.

        Args:
            email: User email address
            password: User password

        Returns:
            Dict with the user (lists prefetched) and the token

        Raises:
            InvalidCredentialsException: If the email is unknown or the
                password does not match; both cases look the same to the caller
        """
        check = AuthenticationService.check_credentials(email, password)

        if not check.ok:
            logger.warning(f"Failed login attempt ({check.failure}) for: {email}")
            raise InvalidCredentialsException(_("Incorrect email or password."))

        user = check.user
        token = AuthenticationService.issue_token(user)

        logger.info(f"User authenticated successfully: {user.email}")

        # Load both lists for the response in one prefetch
        user = User.objects.with_lists().get(pk=user.pk)

        return {"user": user, "token": token}


# ================================================================
# CONVENIENCE FUNCTIONS
# ================================================================


def check_credentials(email: str, password: str) -> CredentialCheck:
    """Convenience function for credential checks."""
    return AuthenticationService.check_credentials(email, password)


def login_user(email: str, password: str) -> Dict:
    """Convenience function for user login."""
    return AuthenticationService.login(email, password)
