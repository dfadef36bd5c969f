"""
Dependency injection container.
Creates and wires all application components.
"""
from functools import lru_cache

from streamcatalog.repositories.memory import InMemoryItemStore, InMemoryUserStore
from streamcatalog.services.platform import StreamingPlatform


# =============================================================================
# Singleton Instances (Application Lifetime)
# =============================================================================


@lru_cache()
def get_item_store() -> InMemoryItemStore:
    """Get singleton item store."""
    return InMemoryItemStore()


@lru_cache()
def get_user_store() -> InMemoryUserStore:
    """Get singleton user store."""
    return InMemoryUserStore()


@lru_cache()
def get_platform() -> StreamingPlatform:
    """
    Get the platform with both stores wired.
    This is the main entry point for callers.
    """
    return StreamingPlatform(
        item_store=get_item_store(),
        user_store=get_user_store(),
    )


# =============================================================================
# Cleanup Functions
# =============================================================================


def clear_caches() -> None:
    """Clear all cached singleton instances (for testing)."""
    get_item_store.cache_clear()
    get_user_store.cache_clear()
    get_platform.cache_clear()
