"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteMemoStore,
    close_pool,
    get_connection,
    get_memo_store,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteMemoStore",
    "get_memo_store",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
