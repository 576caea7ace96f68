"""
Core mixins package for myFlix.
Provides reusable model mixins for common functionality.
"""

from .models import TimeStampedMixin, UUIDMixin

__all__ = [
    "TimeStampedMixin",
    "UUIDMixin",
]
