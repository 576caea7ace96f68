import logging

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(JWTAuthentication):
    """
    Bearer token gate for the API.

    Reads ``Authorization: Bearer <token>``, verifies signature and expiry,
    and resolves the ``sub`` claim (the account email) to a user. A request
    without a bearer header stays anonymous and is rejected by the
    ``IsAuthenticated`` permission.
    """

    def authenticate(self, request):
        try:
            result = super().authenticate(request)
        except (InvalidToken, AuthenticationFailed) as e:
            logger.warning(
                f"Rejected bearer token on {request.method} {request.path}: {e}"
            )
            raise

        if result is not None:
            user, _ = result
            logger.debug(f"Authenticated {user.email} for {request.path}")

        return result
