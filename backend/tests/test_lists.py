"""Tests for the favorites and watch-list endpoints."""
import uuid

import pytest

from apps.lists.models import ListEntry
from core.constants import ListType


def favorite_url(user, movie_id):
    return f"/lists/{user.email}/favorite/{movie_id}"


def watch_url(user, movie_id):
    return f"/lists/{user.email}/watch/{movie_id}"


def ids(movies):
    return [m["id"] for m in movies]


class TestFavorites:
    def test_add_returns_expanded_user(self, auth_client, user, lambs):
        response = auth_client.post(favorite_url(user, lambs.id))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["email"] == user.email
        assert ids(data["favorite_movies"]) == [str(lambs.id)]
        assert data["favorite_movies"][0]["title"] == lambs.title
        assert data["to_watch"] == []

    def test_adding_twice_keeps_one_entry(self, auth_client, user, lambs):
        auth_client.post(favorite_url(user, lambs.id))
        response = auth_client.post(favorite_url(user, lambs.id))

        assert response.status_code == 200
        assert ids(response.json()["data"]["favorite_movies"]) == [str(lambs.id)]
        assert ListEntry.objects.filter(user=user).count() == 1

    def test_keeps_insertion_order(self, auth_client, user, lambs, shawshank):
        auth_client.post(favorite_url(user, shawshank.id))
        response = auth_client.post(favorite_url(user, lambs.id))

        assert ids(response.json()["data"]["favorite_movies"]) == [
            str(shawshank.id),
            str(lambs.id),
        ]

    def test_add_then_remove_restores_the_list(self, auth_client, user, catalog):
        lambs, shawshank = catalog
        auth_client.post(favorite_url(user, shawshank.id))

        auth_client.post(favorite_url(user, lambs.id))
        response = auth_client.delete(favorite_url(user, lambs.id))

        assert response.status_code == 200
        assert ids(response.json()["data"]["favorite_movies"]) == [
            str(shawshank.id)
        ]

    def test_removing_absent_movie_is_a_no_op(self, auth_client, user, lambs):
        response = auth_client.delete(favorite_url(user, lambs.id))

        assert response.status_code == 200
        assert response.json()["data"]["favorite_movies"] == []


class TestWatchList:
    def test_independent_of_favorites(self, auth_client, user, lambs):
        auth_client.post(favorite_url(user, lambs.id))
        response = auth_client.post(watch_url(user, lambs.id))

        data = response.json()["data"]
        assert ids(data["favorite_movies"]) == [str(lambs.id)]
        assert ids(data["to_watch"]) == [str(lambs.id)]

        response = auth_client.delete(watch_url(user, lambs.id))

        data = response.json()["data"]
        assert ids(data["favorite_movies"]) == [str(lambs.id)]
        assert data["to_watch"] == []
        assert ListEntry.objects.get(user=user).list_type == ListType.FAVORITE


class TestListAccess:
    def test_requires_token(self, api_client, user, lambs):
        assert api_client.post(favorite_url(user, lambs.id)).status_code == 401

    def test_other_users_list_is_forbidden(self, auth_client, other_user, lambs):
        response = auth_client.post(favorite_url(other_user, lambs.id))

        assert response.status_code == 403
        assert response.json()["error"]["message"] == "Permission denied"
        assert not ListEntry.objects.exists()

    def test_malformed_movie_id_does_not_route(self, auth_client, user):
        response = auth_client.post(f"/lists/{user.email}/favorite/not-a-uuid")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_unknown_list_name_does_not_route(self, auth_client, user):
        response = auth_client.post(f"/lists/{user.email}/seen/{uuid.uuid4()}")

        assert response.status_code == 404

    # SQLite checks foreign keys at commit, so this needs real transactions
    @pytest.mark.django_db(transaction=True)
    def test_unknown_movie_id_fails_in_the_store(self, auth_client, user):
        response = auth_client.post(favorite_url(user, uuid.uuid4()))

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"code": 500, "message": "Something broke!"},
        }
        assert not ListEntry.objects.exists()
