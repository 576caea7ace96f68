"""
Movie serializers package.
"""

from .actor import ActorSerializer
from .embedded import DirectorSerializer, GenreSerializer
from .movie import MovieSerializer, MovieSummarySerializer

__all__ = [
    "ActorSerializer",
    "DirectorSerializer",
    "GenreSerializer",
    "MovieSerializer",
    "MovieSummarySerializer",
]
