"""
Pytest configuration and fixtures.
"""
import pytest

from streamcatalog.dependencies import clear_caches
from streamcatalog.models.schemas import MediaItem, User
from streamcatalog.repositories.memory import InMemoryItemStore, InMemoryUserStore
from streamcatalog.services.platform import StreamingPlatform


def no_delay(duration_min: int) -> None:
    """Zero-delay playback hook."""


@pytest.fixture
def item_store():
    """Fixture for an empty item store."""
    return InMemoryItemStore()


@pytest.fixture
def user_store():
    """Fixture for an empty user store."""
    return InMemoryUserStore()


@pytest.fixture
def platform(item_store, user_store):
    """
    Platform fixture with a zero-delay playback hook.
    Uses fresh in-memory stores for isolation.
    """
    return StreamingPlatform(
        item_store=item_store,
        user_store=user_store,
        delay=no_delay,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    yield
    clear_caches()


@pytest.fixture
def sample_item():
    """Fixture for a valid media item."""
    return MediaItem(
        id="stream-1",
        title="Inception",
        genre="Accion",
        duration_min=148,
        url="http://stream.com/inception",
    )


@pytest.fixture
def sample_user():
    """Fixture for a valid user."""
    return User(id="user-1", username="alice", subscription="Premium")
