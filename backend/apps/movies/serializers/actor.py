"""
Actor serializers.
"""

from rest_framework import serializers

from ..models import Actor


class ActorSerializer(serializers.ModelSerializer):
    """Actor as shown inside a movie."""

    class Meta:
        model = Actor
        fields = ["id", "name", "bio", "birthday", "image_path"]
        read_only_fields = fields
