"""Store implementations package."""
from .memory import InMemoryItemStore, InMemoryUserStore

__all__ = [
    "InMemoryItemStore",
    "InMemoryUserStore",
]
