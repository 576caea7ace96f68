"""
Lists Services Package
"""

from .list_service import ListService

__all__ = [
    "ListService",
]
