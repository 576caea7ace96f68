from .list_entry import ListEntryManager

__all__ = [
    "ListEntryManager",
]
