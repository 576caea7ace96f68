"""
Custom managers for Movie models.
"""

from .movie import MovieManager

__all__ = [
    "MovieManager",
]
