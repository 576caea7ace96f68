from .catalog_views import DirectorDetailView, GenreDetailView
from .movie_views import MovieDetailView, MovieListView

__all__ = [
    # Movie Views
    "MovieListView",
    "MovieDetailView",
    # Embedded document lookups
    "GenreDetailView",
    "DirectorDetailView",
]
