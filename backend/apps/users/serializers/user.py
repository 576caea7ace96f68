"""
User serializers.
"""

from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from django.contrib.auth import get_user_model
from django.utils.translation import gettext_lazy as _

from apps.movies.serializers import MovieSummarySerializer
from core.constants import NAME_MIN_LENGTH, ListType

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """
    User document with both lists expanded to movie summaries.

    Reads ``list_entries`` through the prefetch cache when the queryset was
    built with ``User.objects.with_lists()``.
    """

    favorite_movies = serializers.SerializerMethodField()
    to_watch = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["email", "name", "birthday", "favorite_movies", "to_watch"]
        read_only_fields = fields

    def _movies_in(self, obj, list_type):
        movies = [
            entry.movie
            for entry in obj.list_entries.all()
            if entry.list_type == list_type
        ]
        return MovieSummarySerializer(movies, many=True).data

    @extend_schema_field(MovieSummarySerializer(many=True))
    def get_favorite_movies(self, obj):
        return self._movies_in(obj, ListType.FAVORITE)

    @extend_schema_field(MovieSummarySerializer(many=True))
    def get_to_watch(self, obj):
        return self._movies_in(obj, ListType.WATCH)


class UserAccountSerializer(serializers.ModelSerializer):
    """Account fields returned after create and update."""

    class Meta:
        model = User
        fields = ["email", "name", "birthday"]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """
    Registration payload.

    Email uniqueness is left to the service so a taken email maps to a
    conflict rather than a validation error.
    """

    email = serializers.EmailField(max_length=254, help_text=_("Login email"))
    name = serializers.CharField(
        min_length=NAME_MIN_LENGTH, max_length=150, help_text=_("Display name")
    )
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
        help_text=_("Account password"),
    )
    birthday = serializers.DateField(
        required=False, allow_null=True, help_text=_("Birth date, YYYY-MM-DD")
    )


class UserUpdateSerializer(serializers.Serializer):
    """
    Partial account update. Any other field in the payload, email included,
    is ignored.
    """

    name = serializers.CharField(
        required=False, min_length=NAME_MIN_LENGTH, max_length=150
    )
    password = serializers.CharField(
        required=False,
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )
    birthday = serializers.DateField(required=False, allow_null=True)
