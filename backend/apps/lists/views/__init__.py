from .list_views import ListEntryView

__all__ = [
    "ListEntryView",
]
