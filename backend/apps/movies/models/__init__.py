"""
Movies models package.
"""

from .actor import Actor
from .movie import Movie

__all__ = [
    "Actor",
    "Movie",
]
