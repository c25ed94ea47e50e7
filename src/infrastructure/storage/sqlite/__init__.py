"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.memo_store import SQLiteMemoStore

# Type alias for convenience
MemoStore = SQLiteMemoStore

# Singleton instance
_memo_store: SQLiteMemoStore | None = None


async def get_memo_store() -> SQLiteMemoStore:
    """Get singleton memo store instance."""
    global _memo_store
    if _memo_store is None:
        _memo_store = SQLiteMemoStore()
    return _memo_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteMemoStore",
    "MemoStore",
    # Factory functions
    "get_memo_store",
]
