"""
Movie serializers.
"""

from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from ..models import Movie
from .actor import ActorSerializer
from .embedded import DirectorSerializer, GenreSerializer


class MovieSerializer(serializers.ModelSerializer):
    """
    Full movie document with actors expanded.
    """

    genre = serializers.SerializerMethodField()
    director = serializers.SerializerMethodField()
    actors = ActorSerializer(many=True, read_only=True)

    class Meta:
        model = Movie
        fields = [
            "id",
            "title",
            "description",
            "genre",
            "director",
            "image_path",
            "featured",
            "release_year",
            "mpa_rating",
            "imdb_rating",
            "actors",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    # Embedded documents are returned exactly as stored
    @extend_schema_field(GenreSerializer)
    def get_genre(self, obj):
        return obj.genre or {}

    @extend_schema_field(DirectorSerializer)
    def get_director(self, obj):
        return obj.director or {}


class MovieSummarySerializer(serializers.ModelSerializer):
    """
    Movie reference inside a user's lists: no actors, genre or director.
    """

    class Meta:
        model = Movie
        fields = [
            "id",
            "title",
            "description",
            "image_path",
            "featured",
            "release_year",
            "mpa_rating",
            "imdb_rating",
        ]
        read_only_fields = fields
