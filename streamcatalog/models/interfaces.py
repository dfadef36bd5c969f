"""
Store and capability interfaces (abstractions).
Using Protocol for structural subtyping (duck typing with type hints).
These define the contracts that storage implementations must follow.
"""
from typing import List, Protocol, runtime_checkable

from streamcatalog.models.schemas import MediaItem, User


@runtime_checkable
class Playable(Protocol):
    """What the playback simulation needs to know about an item."""

    @property
    def id(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def genre(self) -> str: ...

    @property
    def duration_min(self) -> int: ...

    @property
    def url(self) -> str: ...


@runtime_checkable
class ItemStore(Protocol):
    """
    Interface for media item storage.
    Current implementation: in-memory map.
    """

    def add_item(self, item: MediaItem) -> None:
        """
        Validate and store an item.

        Raises:
            InvalidInputError: Empty title/URL, non-positive duration or
                unknown genre
            AlreadyExistsError: An item with the same id is stored
        """
        ...

    def get_item(self, item_id: str) -> MediaItem:
        """
        Fetch an item by id.

        Raises:
            ItemNotFoundError: No item with this id
        """
        ...

    def list_items(self) -> List[MediaItem]:
        """Return a new list with every stored item, in no particular order."""
        ...


@runtime_checkable
class UserStore(Protocol):
    """
    Interface for user storage.
    Current implementation: in-memory map.
    """

    def add_user(self, user: User) -> None:
        """
        Validate and store a user.

        Raises:
            InvalidInputError: Empty username or subscription
            AlreadyExistsError: A user with the same id is stored
        """
        ...

    def get_user(self, user_id: str) -> User:
        """
        Fetch a user by id.

        Raises:
            UserNotFoundError: No user with this id
        """
        ...

    def list_users(self) -> List[User]:
        """Return a new list with every stored user, in no particular order."""
        ...
