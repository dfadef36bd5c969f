"""
Streaming platform service - main business logic orchestrator.
Coordinates the item store, the user store and the playback simulation.
"""
import logging
from typing import List, Optional, Tuple

from pydantic import ValidationError

from streamcatalog.config import get_settings
from streamcatalog.core.exceptions import AppException, InvalidInputError
from streamcatalog.models.interfaces import ItemStore, UserStore
from streamcatalog.models.schemas import MediaItem, User
from streamcatalog.services.playback import PlaybackDelay, play, simulate_playback

logger = logging.getLogger(__name__)


def generate_next_id(prefix: str, current_count: int) -> str:
    """
    Build the next sequential id from the current store size.

    Only safe because nothing is ever removed from a store; two callers
    reading the same count would produce the same id.
    """
    return f"{prefix}-{current_count + 1}"


class StreamingPlatform:
    """
    Facade over the catalog.

    Responsibilities:
    - Generate ids and build entities
    - Persist them through the stores
    - Resolve user and item before running playback
    """

    def __init__(
            self,
            item_store: ItemStore,
            user_store: UserStore,
            delay: Optional[PlaybackDelay] = None,
    ) -> None:
        """
        Initialize platform with dependencies.

        Args:
            item_store: Store for media items
            user_store: Store for users
            delay: Playback delay hook (default: sleep based simulation)
        """
        self._item_store = item_store
        self._user_store = user_store
        self._delay = delay or simulate_playback

    def register_user(self, username: str, subscription: str) -> User:
        """
        Register a new user with a generated id.

        Raises:
            InvalidInputError: Empty username/subscription or duplicate id
        """
        settings = get_settings()
        user_id = generate_next_id(
            settings.USER_ID_PREFIX, len(self._user_store.list_users())
        )
        try:
            user = User(id=user_id, username=username, subscription=subscription)
            self._user_store.add_user(user)
        except ValidationError as e:
            raise InvalidInputError(
                "failed to register user: invalid input data",
                details={"errors": e.errors(include_url=False)},
            ) from e
        except AppException as e:
            raise e.with_context("failed to register user") from e

        logger.info(
            f"User registered: {user.username} (id={user.id}, "
            f"subscription={user.subscription})",
            extra={"user_id": user.id},
        )
        return user

    def add_content(
            self,
            title: str,
            genre: str,
            url: str,
            duration_min: int,
    ) -> MediaItem:
        """
        Add a new item to the catalog with a generated id.

        Raises:
            InvalidInputError: Invalid fields, unknown genre or duplicate id
        """
        settings = get_settings()
        item_id = generate_next_id(
            settings.ITEM_ID_PREFIX, len(self._item_store.list_items())
        )
        try:
            item = MediaItem(
                id=item_id,
                title=title,
                genre=genre,
                url=url,
                duration_min=duration_min,
            )
            self._item_store.add_item(item)
        except ValidationError as e:
            raise InvalidInputError(
                "failed to add content: invalid input data",
                details={"errors": e.errors(include_url=False)},
            ) from e
        except AppException as e:
            raise e.with_context("failed to add content") from e

        logger.info(
            f"Content added: {item.title} (id={item.id}, "
            f"duration={item.duration_min} min)",
            extra={"item_id": item.id},
        )
        return item

    def get_content_details(self, item_id: str) -> MediaItem:
        """Fetch an item. Raises ItemNotFoundError when absent."""
        return self._item_store.get_item(item_id)

    def get_user_details(self, user_id: str) -> User:
        """Fetch a user. Raises UserNotFoundError when absent."""
        return self._user_store.get_user(user_id)

    def get_watch_history(self, user_id: str) -> Tuple[str, ...]:
        """Item ids the user has finished, oldest first."""
        return self._user_store.get_user(user_id).watch_history

    def list_content(self) -> List[MediaItem]:
        return self._item_store.list_items()

    def list_users(self) -> List[User]:
        return self._user_store.list_users()

    def user_watch_item(self, user_id: str, item_id: str) -> None:
        """
        Play an item for a user.

        The user is resolved first, so an unknown user wins over an
        unknown item.

        Raises:
            UserNotFoundError: Unknown user
            ItemNotFoundError: Unknown item
        """
        user = self._user_store.get_user(user_id)
        item = self._item_store.get_item(item_id)
        play(user, item, delay=self._delay)
