"""
Domain models using Pydantic.
All data structures for the catalog and playback simulation.
"""
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictInt, field_validator


class Genre(str, Enum):
    """Fixed set of catalog genres. Values are the labels stored on items."""

    ACTION = "Accion"
    COMEDY = "Comedia"
    DRAMA = "Drama"
    HORROR = "Terror"
    MUSICAL = "Musical"
    DOCUMENTARY = "Documental"
    ANIMATION = "Animacion"

    @classmethod
    def parse(cls, value: object) -> Optional["Genre"]:
        """
        Resolve a catalog label or English name to a Genre.

        Matching is case-insensitive. Returns None for anything outside
        the fixed set.
        """
        if isinstance(value, Genre):
            return value
        if not isinstance(value, str):
            return None
        needle = value.casefold()
        for genre in cls:
            if needle in (genre.value.casefold(), genre.name.casefold()):
                return genre
        return None

    @classmethod
    def is_valid(cls, value: object) -> bool:
        return cls.parse(value) is not None


class MediaItem(BaseModel):
    """
    Playable catalog entry.
    Immutable once created; content rules are enforced by the item store.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique item identifier")
    title: str = Field(..., description="Display title")
    genre: str = Field(..., description="Genre label, see Genre")
    duration_min: StrictInt = Field(..., description="Duration in minutes")
    url: str = Field(..., description="Playback URL")

    @field_validator("genre", mode="before")
    @classmethod
    def canonical_genre(cls, value: object) -> object:
        """Store the catalog label for known genres; the store rejects the rest."""
        genre = Genre.parse(value)
        return genre.value if genre is not None else value


class User(BaseModel):
    """
    Registered viewer.

    Watch history is append-only and exposed as a tuple copy. The current
    item is only set while a playback is running.
    """

    id: str = Field(..., frozen=True, description="Unique user identifier")
    username: str = Field(..., description="Display name")
    subscription: str = Field(..., description="Subscription tier, e.g. Premium")

    _watch_history: List[str] = PrivateAttr(default_factory=list)
    _current_item: Optional[MediaItem] = PrivateAttr(default=None)

    @property
    def watch_history(self) -> Tuple[str, ...]:
        """Item ids in the order they were played."""
        return tuple(self._watch_history)

    @property
    def current_item(self) -> Optional[MediaItem]:
        return self._current_item

    def add_to_watch_history(self, item_id: str) -> None:
        self._watch_history.append(item_id)

    def set_current_item(self, item: Optional[MediaItem]) -> None:
        self._current_item = item
