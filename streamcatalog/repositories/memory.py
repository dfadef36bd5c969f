"""
In-memory store implementations.
Each store keeps a dict guarded by a lock; nothing survives a restart.
"""
import logging
from threading import Lock
from typing import Dict, List, Optional

from streamcatalog.core.exceptions import (
    AlreadyExistsError,
    InvalidInputError,
    ItemNotFoundError,
    UserNotFoundError,
)
from streamcatalog.models.schemas import Genre, MediaItem, User

logger = logging.getLogger(__name__)

GENRE_LABELS = frozenset(genre.value for genre in Genre)


class InMemoryItemStore:
    """In-memory implementation of ItemStore."""

    def __init__(self) -> None:
        self._items: Dict[str, MediaItem] = {}
        self._lock = Lock()

    def add_item(self, item: Optional[MediaItem]) -> None:
        """Validate and store an item. State is untouched on failure."""
        self._validate(item)

        with self._lock:
            if item.id in self._items:
                raise AlreadyExistsError("item", item.id)
            self._items[item.id] = item

        logger.debug(f"Item stored: id={item.id}, title={item.title}")

    def get_item(self, item_id: str) -> MediaItem:
        """Fetch an item by id."""
        with self._lock:
            item = self._items.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def list_items(self) -> List[MediaItem]:
        """Return every stored item."""
        with self._lock:
            return list(self._items.values())

    @staticmethod
    def _validate(item: Optional[MediaItem]) -> None:
        if item is None:
            raise InvalidInputError("invalid input data: item is missing")
        if not item.title or not item.url or item.duration_min <= 0:
            raise InvalidInputError(
                "invalid input data",
                details={
                    "id": item.id,
                    "title": item.title,
                    "url": item.url,
                    "duration_min": item.duration_min,
                },
            )
        if item.genre not in GENRE_LABELS:
            raise InvalidInputError(
                f"invalid input data: genre '{item.genre}' is not valid",
                details={"genre": item.genre, "allowed": [g.value for g in Genre]},
            )


class InMemoryUserStore:
    """In-memory implementation of UserStore."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = Lock()

    def add_user(self, user: Optional[User]) -> None:
        """Validate and store a user. State is untouched on failure."""
        if user is None:
            raise InvalidInputError("invalid input data: user is missing")
        if not user.username or not user.subscription:
            raise InvalidInputError(
                "invalid input data",
                details={
                    "id": user.id,
                    "username": user.username,
                    "subscription": user.subscription,
                },
            )

        with self._lock:
            if user.id in self._users:
                raise AlreadyExistsError("user", user.id)
            self._users[user.id] = user

        logger.debug(f"User stored: id={user.id}, username={user.username}")

    def get_user(self, user_id: str) -> User:
        """Fetch a user by id."""
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> List[User]:
        """Return every stored user."""
        with self._lock:
            return list(self._users.values())
