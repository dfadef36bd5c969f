"""Models package - domain entities and interfaces."""
from .interfaces import ItemStore, Playable, UserStore
from .schemas import Genre, MediaItem, User

__all__ = [
    # Interfaces
    "ItemStore",
    "Playable",
    "UserStore",
    # Schemas
    "Genre",
    "MediaItem",
    "User",
]
