"""
Essential user management services for myFlix.
"""

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from apps.authentication.passwords import hash_password
from core.exceptions import UserAlreadyExistsException, UserNotFoundException

# Type hints only
if TYPE_CHECKING:
    from apps.authentication.models import User
else:
    # Runtime imports
    from django.contrib.auth import get_user_model

    User = get_user_model()

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "password", "birthday")


class UserService:
    """
    Essential user management service.
    Handles registration, lookup, account updates and deletion.
    """

    @staticmethod
    def list_users() -> QuerySet:
        """All users with their lists expanded."""
        return User.objects.with_lists()

    @staticmethod
    def get_user(email: str) -> "User":
        """
        Get one user by email with both lists loaded.

        Raises:
            UserNotFoundException: If no user has that email
        """
        try:
            return User.objects.with_lists().get(email=email)
        except User.DoesNotExist:
            logger.info(f"User not found: {email}")
            raise UserNotFoundException()

    @staticmethod
    def create_user(
        email: str, name: str, password: str, birthday: Optional[date] = None
    ) -> "User":
        """
        Register a new account with a hashed password.

        Args:
            email: Login email, must not be registered yet
            name: Display name
            password: Plaintext password, stored hashed
            birthday: Optional birth date

        Returns:
            The created user

        Raises:
            UserAlreadyExistsException: If the email is taken; nothing is written
        """
        email = User.objects.normalize_email(email)

        if User.objects.filter(email=email).exists():
            logger.info(f"Registration refused, email already registered: {email}")
            raise UserAlreadyExistsException()

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email, password=password, name=name, birthday=birthday
                )
        except IntegrityError:
            # A concurrent registration took the email after the check above
            logger.info(f"Registration lost race for email: {email}")
            raise UserAlreadyExistsException()

        logger.info(f"User account created successfully: {email}")
        return user

    @staticmethod
    def update_user(email: str, **fields) -> "User":
        """
        Update name, password and/or birthday. Other keys are ignored.

        Raises:
            UserNotFoundException: If the account no longer exists
        """
        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise UserNotFoundException()

        changed = []
        for field in UPDATABLE_FIELDS:
            if field not in fields:
                continue
            value = fields[field]
            if field == "password":
                value = hash_password(value)
            setattr(user, field, value)
            changed.append(field)

        if changed:
            user.save(update_fields=changed + ["updated_at"])
            logger.info(f"User {email} updated fields: {', '.join(changed)}")

        return user

    @staticmethod
    def delete_user(email: str) -> None:
        """
        Delete the account and, through the cascade, its list entries.

        Raises:
            UserNotFoundException: If the account no longer exists
        """
        deleted, _ = User.objects.filter(email=email).delete()
        if not deleted:
            raise UserNotFoundException()

        logger.info(f"User account deleted: {email}")
