"""
Lists models package.
"""

from .list_entry import ListEntry

__all__ = [
    "ListEntry",
]
