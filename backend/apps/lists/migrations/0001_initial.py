import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("movies", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ListEntry",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
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
                    "list_type",
                    models.CharField(
                        choices=[("favorite", "Favorite Movies"), ("watch", "To Watch")],
                        help_text="Which list the movie belongs to",
                        max_length=20,
                        verbose_name="list type",
                    ),
                ),
                (
                    "movie",
                    models.ForeignKey(
                        help_text="Movie in the list",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="list_entries",
                        to="movies.movie",
                        verbose_name="movie",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="Owner of the list",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="list_entries",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="user",
                    ),
                ),
            ],
            options={
                "verbose_name": "List entry",
                "verbose_name_plural": "List entries",
                "db_table": "lists_list_entry",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["user", "list_type"],
                        name="list_entry_user_type_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("user", "movie", "list_type"),
                        name="unique_user_movie_list_type",
                    )
                ],
            },
        ),
    ]
