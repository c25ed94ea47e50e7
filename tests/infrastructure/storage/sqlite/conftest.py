"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure.storage.sqlite.connection import ConnectionPool
from src.infrastructure.storage.sqlite.memo_store import SQLiteMemoStore


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def memo_pool(temp_db_path: Path) -> AsyncGenerator[ConnectionPool, None]:
    """Connection pool over a freshly migrated temporary database."""
    pool = ConnectionPool(temp_db_path, pool_size=2, busy_timeout=5000)
    await pool.initialize()
    yield pool
    await pool.close()


@pytest.fixture
async def memo_pool_factory(temp_db_path: Path):
    """Build unopened pools on the temporary database; all are closed afterwards."""
    pools: list[ConnectionPool] = []

    def build(**kwargs) -> ConnectionPool:
        pool = ConnectionPool(temp_db_path, **kwargs)
        pools.append(pool)
        return pool

    yield build
    for pool in pools:
        await pool.close()


@pytest.fixture
def sqlite_memo_store(memo_pool: ConnectionPool) -> SQLiteMemoStore:
    """Memo store bound to the temporary database."""
    return SQLiteMemoStore(pool=memo_pool)


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock
