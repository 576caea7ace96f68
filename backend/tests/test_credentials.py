"""Tests for password hashing and the credential check."""
from apps.authentication.passwords import hash_password, verify_password
from apps.authentication.services import AuthenticationService, check_credentials


class TestPasswords:
    def test_hash_is_salted_and_one_way(self):
        first = hash_password("correct horse")
        second = hash_password("correct horse")

        assert "correct horse" not in first
        assert first != second

    def test_verify(self, user, password):
        assert verify_password(user, password)
        assert not verify_password(user, password + "!")

    def test_user_without_password_never_verifies(self, db):
        from django.contrib.auth import get_user_model

        user = get_user_model().objects.create_user(
            email="nopass@example.com", name="No Password"
        )

        assert not verify_password(user, "")
        assert not verify_password(user, "anything")


class TestCheckCredentials:
    def test_success(self, user, password):
        check = check_credentials(user.email, password)

        assert check.ok
        assert check.user == user
        assert check.failure is None

    def test_unknown_email(self, db):
        check = check_credentials("ghost@example.com", "whatever")

        assert not check.ok
        assert check.failure == AuthenticationService.UNKNOWN_EMAIL

    def test_wrong_password(self, user):
        check = check_credentials(user.email, "wrong")

        assert not check.ok
        assert check.user is None
        assert check.failure == AuthenticationService.WRONG_PASSWORD

    def test_domain_case_is_normalized(self, user, password):
        assert check_credentials("jane@EXAMPLE.com", password).ok
