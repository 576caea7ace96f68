"""Shared pytest fixtures for the myFlix API tests.

Every fixture that touches the database pulls in pytest-django's ``db``
fixture, so tests using them need no explicit marker.
"""
from datetime import date

import pytest
from rest_framework.test import APIClient

from django.contrib.auth import get_user_model

from apps.authentication.services import AuthenticationService
from apps.movies.models import Actor, Movie

from .data import (
    ACTION_THRILLER,
    DARABONT,
    DEMME,
    DRAMA,
    PASSWORD,
    THRILLER,
    WOO,
)

User = get_user_model()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email="jane@example.com",
        password=PASSWORD,
        name="Jane Doe",
        birthday=date(1990, 1, 1),
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email="john@example.com", password=PASSWORD, name="John Smith"
    )


@pytest.fixture
def token(user):
    return AuthenticationService.issue_token(user)


@pytest.fixture
def auth_client(token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture
def actors(db):
    return {
        "foster": Actor.objects.create(name="Jodie Foster", birthday=date(1962, 11, 19)),
        "hopkins": Actor.objects.create(name="Anthony Hopkins"),
        "robbins": Actor.objects.create(name="Tim Robbins"),
    }


@pytest.fixture
def lambs(actors):
    movie = Movie.objects.create(
        title="The Silence of the Lambs",
        description="A young FBI cadet seeks help from an imprisoned killer.",
        genre=THRILLER,
        director=DEMME,
        image_path="silenceofthelambs.png",
        featured=True,
        release_year=1991,
        mpa_rating="R",
        imdb_rating=8.6,
    )
    movie.actors.add(actors["foster"], actors["hopkins"])
    return movie


@pytest.fixture
def shawshank(actors):
    movie = Movie.objects.create(
        title="The Shawshank Redemption",
        description="Two imprisoned men bond over a number of years.",
        genre=DRAMA,
        director=DARABONT,
        image_path="shawshank.png",
        release_year=1994,
        mpa_rating="R",
        imdb_rating=9.3,
    )
    movie.actors.add(actors["robbins"])
    return movie


@pytest.fixture
def catalog(lambs, shawshank):
    return [lambs, shawshank]


@pytest.fixture
def face_off(db):
    return Movie.objects.create(
        title="Face/Off",
        description="An FBI agent and a terrorist swap faces.",
        genre=ACTION_THRILLER,
        director=WOO,
        release_year=1997,
        mpa_rating="R",
    )
