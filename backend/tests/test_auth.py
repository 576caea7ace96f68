"""Tests for login and the bearer token gate."""
from datetime import timedelta

import pytest
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.tokens import AccessToken

from django.utils import timezone

from apps.lists.models import ListEntry
from core.constants import ListType

LOGIN_URL = "/login"
GATED_URL = "/movies"


def login(client, email, password):
    return client.post(LOGIN_URL, {"email": email, "password": password}, format="json")


class TestLogin:
    def test_token_subject_is_user_email(self, api_client, user, password):
        response = login(api_client, user.email, password)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "You are successfully logged in"
        assert AccessToken(body["data"]["token"])["sub"] == user.email

    def test_token_lasts_seven_days(self, api_client, user, password):
        response = login(api_client, user.email, password)
        token = AccessToken(response.json()["data"]["token"])

        lifetime = token["exp"] - token["iat"]
        assert lifetime == int(timedelta(days=7).total_seconds())

    def test_returned_user_has_no_password(self, api_client, user, password):
        response = login(api_client, user.email, password)

        returned = response.json()["data"]["user"]
        assert returned["email"] == user.email
        assert returned["name"] == "Jane Doe"
        assert returned["favorite_movies"] == []
        assert returned["to_watch"] == []
        assert "password" not in returned

    def test_wrong_password_and_unknown_email_look_the_same(self, api_client, user):
        wrong_password = login(api_client, user.email, "not-the-password")
        unknown_email = login(api_client, "nobody@example.com", "whatever")

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["error"] == {
            "code": 401,
            "message": "Incorrect email or password.",
        }

    def test_missing_password_is_a_validation_error(self, api_client, db):
        response = api_client.post(
            LOGIN_URL, {"email": "jane@example.com"}, format="json"
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == 422
        assert "password" in error["fields"]

    def test_stale_authorization_header_is_ignored(self, api_client, user, password):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")

        response = login(api_client, user.email, password)

        assert response.status_code == 200

    @pytest.mark.parametrize("body", ["{bad", '{"email": "jane@example.com", '])
    def test_malformed_json_is_a_client_error(self, api_client, db, body):
        response = api_client.post(LOGIN_URL, body, content_type="application/json")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["error"]["code"] == 400

    def test_unsupported_content_type(self, api_client, db):
        response = api_client.post(LOGIN_URL, "jane", content_type="text/plain")

        assert response.status_code == 415
        assert response.json()["error"]["code"] == 415

    def test_lists_load_in_one_prefetch(
        self, api_client, user, password, catalog, django_assert_max_num_queries
    ):
        lambs, shawshank = catalog
        ListEntry.objects.add(user, lambs.id, ListType.FAVORITE)
        ListEntry.objects.add(user, shawshank.id, ListType.FAVORITE)
        ListEntry.objects.add(user, lambs.id, ListType.WATCH)

        # Account lookup, reload and one prefetch for every list entry
        with django_assert_max_num_queries(3):
            response = login(api_client, user.email, password)

        data = response.json()["data"]["user"]
        assert len(data["favorite_movies"]) == 2
        assert data["to_watch"][0]["title"] == lambs.title


class TestBearerGate:
    def test_valid_token_is_accepted(self, auth_client):
        assert auth_client.get(GATED_URL).status_code == 200

    def test_missing_token(self, api_client, db):
        response = api_client.get(GATED_URL)

        assert response.status_code == 401
        assert response.json()["success"] is False
        assert response.json()["error"]["code"] == 401

    @pytest.mark.parametrize(
        "header",
        [
            "Basic amFuZUBleGFtcGxlLmNvbTpzM2NyZXQ=",
            "Bearer",
            "Bearer two parts",
            "Bearer not-a-jwt",
        ],
    )
    def test_malformed_or_foreign_authorization(self, api_client, user, header):
        api_client.credentials(HTTP_AUTHORIZATION=header)

        assert api_client.get(GATED_URL).status_code == 401

    def test_expired_token(self, api_client, user):
        token = AccessToken.for_user(user)
        token.set_exp(from_time=timezone.now() - timedelta(days=8))
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        assert api_client.get(GATED_URL).status_code == 401

    def test_token_signed_with_another_key(self, api_client, user):
        forged = TokenBackend(
            "HS256", "some-other-signing-key-that-is-long-enough"
        ).encode(dict(AccessToken.for_user(user).payload))
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {forged}")

        assert api_client.get(GATED_URL).status_code == 401

    def test_token_of_deleted_user(self, auth_client, user):
        user.delete()

        assert auth_client.get(GATED_URL).status_code == 401

    def test_token_of_inactive_user(self, auth_client, user):
        user.is_active = False
        user.save()

        assert auth_client.get(GATED_URL).status_code == 401
