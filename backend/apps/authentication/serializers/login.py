"""
Login serializer.
"""

from rest_framework import serializers

from django.utils.translation import gettext_lazy as _


class LoginSerializer(serializers.Serializer):
    """
    Credentials accepted by ``POST /login``.
    """

    email = serializers.CharField(
        max_length=254,
        help_text=_("Account email address"),
    )
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
        help_text=_("Account password"),
    )

    def validate_email(self, value):
        """Normalize email."""
        return value.strip()
