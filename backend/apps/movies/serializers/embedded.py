"""
Serializers describing the genre and director sub-documents stored on a movie.

Lookups return the stored document as is; these classes give it a shape in
the API schema.
"""

from rest_framework import serializers

from django.utils.translation import gettext_lazy as _


class GenreSerializer(serializers.Serializer):
    name = serializers.CharField(help_text=_("Genre name"))
    description = serializers.CharField(required=False, help_text=_("Genre summary"))


class DirectorSerializer(serializers.Serializer):
    name = serializers.CharField(help_text=_("Director name"))
    bio = serializers.CharField(required=False, help_text=_("Short biography"))
    birth = serializers.DateField(
        required=False, allow_null=True, help_text=_("Birth date")
    )
    death = serializers.DateField(
        required=False, allow_null=True, help_text=_("Death date, if any")
    )
