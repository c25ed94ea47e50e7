"""
Connection handling for the memo database.

A small fixed set of aiosqlite connections is opened on first use, after
the memo schema has been migrated. Connections are handed out one at a
time; a caller waits when all of them are busy.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from src.config import get_logger, get_settings
from src.infrastructure.storage.sqlite.migrations.migrator import migrate

logger = get_logger(__name__)

# Applied to every connection right after it is opened
CONNECTION_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA foreign_keys=ON",
)


async def open_connection(db_path: Path, busy_timeout: int) -> aiosqlite.Connection:
    """Open one connection to the memo database with rows addressable by name."""
    conn = await aiosqlite.connect(db_path)
    try:
        for pragma in CONNECTION_PRAGMAS:
            await conn.execute(pragma)
        await conn.execute(f"PRAGMA busy_timeout={int(busy_timeout)}")
    except BaseException:
        await conn.close()
        raise
    conn.row_factory = aiosqlite.Row
    return conn


class ConnectionPool:
    """
    Fixed-size pool of memo database connections.

    The pool opens lazily. Opening is all or nothing: if any connection
    fails to open, the ones already opened are closed and the pool stays
    closed, so the next caller retries from scratch.
    """

    def __init__(
        self,
        db_path: Path,
        pool_size: int = 5,
        busy_timeout: int = 30000,
        migrate: bool = True,
    ):
        self.db_path = db_path
        self.pool_size = pool_size
        self.busy_timeout = busy_timeout
        self.migrate = migrate

        self._idle: asyncio.Queue[aiosqlite.Connection] | None = None
        self._connections: list[aiosqlite.Connection] = []
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._idle is not None

    async def initialize(self) -> None:
        """Migrate the schema and open every connection of the pool."""
        async with self._lock:
            if self.is_open:
                return

            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            if self.migrate:
                await migrate(self.db_path)

            opened: list[aiosqlite.Connection] = []
            try:
                for _ in range(self.pool_size):
                    opened.append(await self._create_connection())
            except BaseException:
                for conn in opened:
                    await conn.close()
                logger.error(
                    "memo_db_open_failed",
                    db_path=str(self.db_path),
                    opened=len(opened),
                    pool_size=self.pool_size,
                )
                raise

            idle: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue()
            for conn in opened:
                idle.put_nowait(conn)
            self._connections = opened
            self._idle = idle

            logger.info(
                "memo_db_opened",
                db_path=str(self.db_path),
                pool_size=self.pool_size,
            )

    async def _create_connection(self) -> aiosqlite.Connection:
        return await open_connection(self.db_path, self.busy_timeout)

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Borrow a connection, opening the pool first if needed.

        Usage:
            async with pool.acquire() as conn:
                await conn.execute(...)
        """
        if not self.is_open:
            await self.initialize()

        idle = self._idle
        conn = await idle.get()
        try:
            yield conn
        finally:
            idle.put_nowait(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection that commits on exit and rolls back on error."""
        async with self.acquire() as conn:
            try:
                yield conn
            except BaseException:
                await conn.rollback()
                raise
            await conn.commit()

    async def close(self) -> None:
        """Close every connection; the pool can be reopened afterwards."""
        async with self._lock:
            connections, self._connections = self._connections, []
            self._idle = None
            for conn in connections:
                await conn.close()
            if connections:
                logger.info("memo_db_closed", db_path=str(self.db_path))


_pool: ConnectionPool | None = None


async def get_pool() -> ConnectionPool:
    """
    Return the process-wide pool, opening it on first call.

    The pool is only published once it opened, so a failed attempt
    leaves nothing behind and the next call tries again.
    """
    global _pool
    if _pool is None:
        storage = get_settings().storage
        pool = ConnectionPool(
            db_path=storage.db_path,
            pool_size=storage.pool_size,
            busy_timeout=storage.busy_timeout,
        )
        await pool.initialize()
        if _pool is None:
            _pool = pool
        else:
            await pool.close()
    return _pool


async def close_pool() -> None:
    """Close and forget the process-wide pool."""
    global _pool
    pool, _pool = _pool, None
    if pool is not None:
        await pool.close()


@asynccontextmanager
async def get_connection() -> AsyncIterator[aiosqlite.Connection]:
    """Borrow a connection from the process-wide pool."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[aiosqlite.Connection]:
    """Borrow a transactional connection from the process-wide pool."""
    pool = await get_pool()
    async with pool.transaction() as conn:
        yield conn
