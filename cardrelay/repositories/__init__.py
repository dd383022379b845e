"""Store implementations."""

from .memory import InMemoryDestinationStore, InMemoryUserStore
from .sql import SqlDestinationStore, SqlUserStore

__all__ = [
    "InMemoryDestinationStore",
    "InMemoryUserStore",
    "SqlDestinationStore",
    "SqlUserStore",
]
