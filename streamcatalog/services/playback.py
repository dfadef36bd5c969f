"""
Playback simulation.
Blocks for a time proportional to the item duration, then records the play
in the user's watch history.
"""
import logging
import time
from typing import Callable, Optional

from streamcatalog.config import get_settings
from streamcatalog.core.exceptions import ItemNotFoundError, UserNotFoundError
from streamcatalog.core.telemetry import get_tracer
from streamcatalog.models.interfaces import Playable
from streamcatalog.models.schemas import User

logger = logging.getLogger(__name__)

# Receives the item duration in minutes and blocks for the simulated play
PlaybackDelay = Callable[[int], None]


def simulate_playback(duration_min: int) -> None:
    """
    Default delay hook.

    Sleeps PLAYBACK_SECONDS_PER_MINUTE seconds per minute of content, so a
    148 minute film takes 148 seconds with the default settings.
    """
    seconds = duration_min * get_settings().PLAYBACK_SECONDS_PER_MINUTE
    logger.debug(f"Simulating playback for {duration_min} min ({seconds:.2f}s)")
    time.sleep(seconds)


def play(
    user: Optional[User],
    item: Optional[Playable],
    delay: PlaybackDelay = simulate_playback,
) -> None:
    """
    Play an item for a user.

    Args:
        user: Viewer whose history is updated
        item: Item to play
        delay: Blocking hook called with the duration in minutes

    Raises:
        UserNotFoundError: user is None
        ItemNotFoundError: item is None
    """
    if user is None:
        raise UserNotFoundError("<none>")
    if item is None:
        raise ItemNotFoundError("<none>")

    log_context = {"user_id": user.id, "item_id": item.id}
    logger.info(
        f"Starting playback for {user.username}: {item.title} "
        f"(genre={item.genre}, duration={item.duration_min} min, url={item.url})",
        extra=log_context,
    )

    with get_tracer().start_as_current_span(
        "playback",
        attributes={
            "user.id": user.id,
            "item.id": item.id,
            "item.genre": item.genre,
            "item.duration_min": item.duration_min,
        },
    ):
        user.set_current_item(item)
        try:
            delay(item.duration_min)
            user.add_to_watch_history(item.id)
        finally:
            user.set_current_item(None)

    logger.info(f"Playback finished: {item.title}", extra=log_context)
