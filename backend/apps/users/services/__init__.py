"""
User Services Module
Handles account registration, lookup, updates and deletion.
"""

from .user_service import UserService

__all__ = [
    "UserService",
]
