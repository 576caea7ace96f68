import uuid

from django.db import migrations, models

import core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Actor",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Random identifier used in URLs",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Date and time when the record was created",
                        verbose_name="created at",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Date and time when the record was last updated",
                        verbose_name="updated at",
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        db_index=True,
                        help_text="Actor name",
                        max_length=255,
                        verbose_name="name",
                    ),
                ),
                (
                    "bio",
                    models.TextField(
                        blank=True, help_text="Short biography", verbose_name="bio"
                    ),
                ),
                (
                    "birthday",
                    models.DateField(
                        blank=True,
                        help_text="Actor birth date",
                        null=True,
                        verbose_name="birthday",
                    ),
                ),
                (
                    "image_path",
                    models.CharField(
                        blank=True,
                        help_text="Path or URL of the actor portrait",
                        max_length=500,
                        verbose_name="image path",
                    ),
                ),
            ],
            options={
                "verbose_name": "Actor",
                "verbose_name_plural": "Actors",
                "db_table": "movies_actor",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Movie",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Random identifier used in URLs",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Date and time when the record was created",
                        verbose_name="created at",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Date and time when the record was last updated",
                        verbose_name="updated at",
                    ),
                ),
                (
                    "title",
                    models.CharField(
                        db_index=True,
                        help_text="Movie title",
                        max_length=255,
                        verbose_name="title",
                    ),
                ),
                (
                    "description",
                    models.TextField(
                        blank=True,
                        help_text="Movie plot summary",
                        verbose_name="description",
                    ),
                ),
                (
                    "genre",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Embedded genre: name and description",
                        validators=[core.validators.validate_genre],
                        verbose_name="genre",
                    ),
                ),
                (
                    "director",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Embedded director: name, bio, birth and death dates",
                        validators=[core.validators.validate_director],
                        verbose_name="director",
                    ),
                ),
                (
                    "image_path",
                    models.CharField(
                        blank=True,
                        help_text="Path or URL of the poster image",
                        max_length=500,
                        verbose_name="image path",
                    ),
                ),
                (
                    "featured",
                    models.BooleanField(
                        default=False,
                        help_text="Highlighted in the client",
                        verbose_name="featured",
                    ),
                ),
                (
                    "release_year",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        help_text="Year of release",
                        null=True,
                        verbose_name="release year",
                    ),
                ),
                (
                    "mpa_rating",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("G", "General Audiences"),
                            ("PG", "Parental Guidance Suggested"),
                            ("PG-13", "Parents Strongly Cautioned"),
                            ("R", "Restricted"),
                            ("NC-17", "Adults Only"),
                            ("NR", "Not Rated"),
                        ],
                        help_text="Content rating, e.g. PG-13",
                        max_length=10,
                        verbose_name="MPA rating",
                    ),
                ),
                (
                    "imdb_rating",
                    models.FloatField(
                        blank=True,
                        help_text="IMDb rating on a 0-10 scale",
                        null=True,
                        validators=[core.validators.validate_rating],
                        verbose_name="IMDb rating",
                    ),
                ),
                (
                    "actors",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Actors appearing in the movie",
                        related_name="movies",
                        to="movies.actor",
                        verbose_name="actors",
                    ),
                ),
            ],
            options={
                "verbose_name": "Movie",
                "verbose_name_plural": "Movies",
                "db_table": "movies_movie",
                "ordering": ["title"],
            },
        ),
    ]
