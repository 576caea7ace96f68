"""Tests for the movie catalog endpoints."""
from urllib.parse import quote


def movie_url(title):
    return f"/movies/{quote(title)}"


class TestMovieList:
    def test_lists_every_movie_with_actors(self, auth_client, catalog):
        response = auth_client.get("/movies")

        assert response.status_code == 200
        movies = response.json()["data"]
        assert [m["title"] for m in movies] == [
            "The Shawshank Redemption",
            "The Silence of the Lambs",
        ]
        lambs = movies[1]
        assert sorted(a["name"] for a in lambs["actors"]) == [
            "Anthony Hopkins",
            "Jodie Foster",
        ]

    def test_empty_catalog(self, auth_client):
        response = auth_client.get("/movies")

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_requires_token(self, api_client, catalog):
        assert api_client.get("/movies").status_code == 401


class TestMovieDetail:
    def test_by_exact_title(self, auth_client, lambs):
        response = auth_client.get(movie_url("The Silence of the Lambs"))

        assert response.status_code == 200
        movie = response.json()["data"]
        assert movie["id"] == str(lambs.id)
        assert movie["release_year"] == 1991
        assert movie["mpa_rating"] == "R"
        assert movie["imdb_rating"] == 8.6
        assert movie["featured"] is True
        assert movie["genre"] == {
            "name": "Thriller",
            "description": "Suspense and tension from start to finish.",
        }
        assert movie["director"]["name"] == "Jonathan Demme"

    def test_title_match_is_case_sensitive(self, auth_client, lambs):
        response = auth_client.get(movie_url("the silence of the lambs"))

        assert response.status_code == 404

    def test_unknown_title(self, auth_client, catalog):
        response = auth_client.get(movie_url("Plan 9 from Outer Space"))

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": {"code": 404, "message": "No such movie"},
        }

    def test_title_with_slash(self, auth_client, face_off):
        response = auth_client.get("/movies/Face%2FOff")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == str(face_off.id)
