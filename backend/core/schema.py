"""
OpenAPI extensions for drf-spectacular.
"""

from drf_spectacular.contrib.rest_framework_simplejwt import SimpleJWTScheme


class BearerTokenScheme(SimpleJWTScheme):
    """Document ``BearerTokenAuthentication`` as the ``bearerAuth`` scheme."""

    target_class = "core.authentication.BearerTokenAuthentication"
    name = "bearerAuth"
    priority = 1
