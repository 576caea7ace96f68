"""
Catalog maintenance through the Django admin.
"""

from django.contrib import admin

from .models import Actor, Movie


@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    list_display = ["title", "release_year", "mpa_rating", "imdb_rating", "featured"]
    list_filter = ["featured", "mpa_rating"]
    search_fields = ["title", "description"]
    filter_horizontal = ["actors"]
    readonly_fields = ["id", "created_at", "updated_at"]


@admin.register(Actor)
class ActorAdmin(admin.ModelAdmin):
    list_display = ["name", "birthday"]
    search_fields = ["name"]
    readonly_fields = ["id", "created_at", "updated_at"]
