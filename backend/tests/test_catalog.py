"""Tests for the genre and director lookups."""
from urllib.parse import quote

from .data import ACTION_THRILLER, DARABONT, DEMME, THRILLER


class TestGenreLookup:
    def test_returns_embedded_genre(self, auth_client, catalog):
        response = auth_client.get("/genres/Thriller")

        assert response.status_code == 200
        assert response.json()["data"] == THRILLER

    def test_unknown_genre(self, auth_client, catalog):
        response = auth_client.get("/genres/Western")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No such genre"

    def test_no_movies(self, auth_client):
        assert auth_client.get("/genres/Thriller").status_code == 404

    def test_requires_token(self, api_client, catalog):
        assert api_client.get("/genres/Thriller").status_code == 401


class TestDirectorLookup:
    def test_returns_embedded_director(self, auth_client, catalog):
        response = auth_client.get(f"/directors/{quote('Jonathan Demme')}")

        assert response.status_code == 200
        assert response.json()["data"] == DEMME

    def test_living_director_keeps_null_death(self, auth_client, catalog):
        response = auth_client.get(f"/directors/{quote('Frank Darabont')}")

        assert response.status_code == 200
        assert response.json()["data"] == DARABONT
        assert response.json()["data"]["death"] is None

    def test_unknown_director(self, auth_client, catalog):
        response = auth_client.get(f"/directors/{quote('Ed Wood')}")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No such director"


class TestNamesWithSlash:
    def test_genre(self, auth_client, face_off):
        response = auth_client.get("/genres/Action%2FThriller")

        assert response.status_code == 200
        assert response.json()["data"] == ACTION_THRILLER

    def test_director(self, auth_client, face_off):
        face_off.director = {"name": "Jeunet/Caro"}
        face_off.save()

        response = auth_client.get("/directors/Jeunet%2FCaro")

        assert response.status_code == 200
        assert response.json()["data"] == {"name": "Jeunet/Caro"}
