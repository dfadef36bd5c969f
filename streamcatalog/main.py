"""
Demo entry point.
Configures logging and telemetry, then drives the platform through a fixed
scripted session.
"""
import logging
from typing import Dict, Optional, Tuple

from streamcatalog.config import get_settings
from streamcatalog.config.logging import configure_logging
from streamcatalog.core.exceptions import AppException
from streamcatalog.core.telemetry import setup_telemetry
from streamcatalog.dependencies import get_platform
from streamcatalog.services.platform import StreamingPlatform

logger = logging.getLogger(__name__)


def run_demo(platform: StreamingPlatform) -> Dict[str, Tuple[str, ...]]:
    """
    Run the scripted session against a platform.

    Failures are expected for the invalid genre and the unknown ids; they are
    logged and the session carries on.

    Returns:
        Watch history per username
    """
    logger.info("--- Registering users ---")
    users = []
    for username, subscription in (("alice", "Premium"), ("bob", "Basic")):
        try:
            users.append(platform.register_user(username, subscription))
        except AppException as e:
            logger.warning(f"Error: {e}")

    logger.info("--- Adding content ---")
    items = []
    catalog = (
        ("Inception", "Accion", "http://stream.com/inception", 148),
        ("Breaking Bad S1E1", "Drama", "http://stream.com/bb-s1e1", 55),
        ("Classical Mix", "Musical", "http://stream.com/classical", 60),
        ("Unknown Movie", "Fantasy", "http://stream.com/unknown", 90),
    )
    for title, genre, url, duration in catalog:
        try:
            items.append(platform.add_content(title, genre, url, duration))
        except AppException as e:
            logger.warning(f"Error: {e}")

    logger.info("--- Available content ---")
    for item in platform.list_content():
        logger.info(
            f"ID: {item.id}, Title: {item.title}, Genre: {item.genre}, "
            f"Duration: {item.duration_min} min"
        )

    logger.info("--- Playback ---")
    attempts = [(user.id, item.id) for user, item in zip(users, items)]
    if users:
        attempts.append((users[0].id, "stream-999"))
    if items:
        attempts.append(("user-999", items[0].id))
    for user_id, item_id in attempts:
        try:
            platform.user_watch_item(user_id, item_id)
        except AppException as e:
            logger.warning(f"Error playing {item_id} for {user_id}: {e}")

    logger.info("--- Watch history ---")
    histories = {}
    for user in users:
        histories[user.username] = platform.get_watch_history(user.id)
        logger.info(f"History of {user.username}: {list(histories[user.username])}")

    return histories


def main(platform: Optional[StreamingPlatform] = None) -> None:
    settings = get_settings()
    configure_logging(debug=settings.DEBUG)
    setup_telemetry(settings)

    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    run_demo(platform or get_platform())
    logger.info("Shutting down")


if __name__ == "__main__":
    main()
