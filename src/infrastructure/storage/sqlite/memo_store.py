"""
SQLite implementation of memo storage.

Handles creation, lookup and completion of advisor memos.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, datetime

import aiosqlite

from src.config import get_logger
from src.core.entities.memo import Memo
from src.core.exceptions import DatabaseError, ValidationError
from src.core.interfaces.memo_store import IMemoStore
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)


class SQLiteMemoStore(IMemoStore):
    """
    SQLite implementation of memo storage.

    Uses the global connection pool unless one is given.
    """

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        self._pool = pool

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[aiosqlite.Connection]:
        if self._pool is not None:
            async with self._pool.acquire() as conn:
                yield conn
        else:
            async with get_connection() as conn:
                yield conn

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        if self._pool is not None:
            async with self._pool.transaction() as conn:
                yield conn
        else:
            async with get_transaction() as conn:
                yield conn

    async def create_memo(
        self,
        user_id: str,
        organization_id: str,
        title: str,
        description: str | None,
        due_date: date,
        due_time: str,
    ) -> Memo:
        """Create a new memo."""
        if not title or not title.strip():
            raise ValidationError("title", "Memo title must not be empty", title)

        memo = Memo(
            user_id=user_id,
            organization_id=organization_id,
            title=title,
            description=description,
            due_date=due_date,
            due_time=due_time,
        )

        try:
            async with self._transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO memos (
                        user_id, organization_id, title, description,
                        due_date, due_time, is_done,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        memo.user_id,
                        memo.organization_id,
                        memo.title,
                        memo.description,
                        memo.due_date.isoformat(),
                        memo.due_time,
                        0,
                        memo.created_at.isoformat(),
                        memo.updated_at.isoformat(),
                    ),
                )
                memo.id = cursor.lastrowid
        except aiosqlite.Error as e:
            raise DatabaseError("create_memo", str(e)) from e

        logger.info(
            "memo_created",
            memo_id=memo.id,
            user_id=user_id,
            due_date=memo.due_date.isoformat(),
        )
        return memo

    async def get_memo(self, memo_id: int) -> Memo | None:
        """Get memo by ID."""
        try:
            async with self._connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM memos WHERE id = ?", (memo_id,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("get_memo", str(e)) from e

        if row is None:
            return None
        return self._row_to_entity(row)

    async def list_memos(
        self,
        user_id: str,
        organization_id: str,
        include_done: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Memo]:
        """List a user's memos, soonest first."""
        query = "SELECT * FROM memos WHERE user_id = ? AND organization_id = ?"
        if not include_done:
            query += " AND is_done = 0"
        query += " ORDER BY due_date ASC, due_time ASC, id ASC LIMIT ? OFFSET ?"

        try:
            async with self._connection() as conn:
                cursor = await conn.execute(
                    query, (user_id, organization_id, limit, offset)
                )
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError("list_memos", str(e)) from e

        return [self._row_to_entity(row) for row in rows]

    async def mark_done(self, memo_id: int) -> bool:
        """Mark a memo as done."""
        try:
            async with self._transaction() as conn:
                cursor = await conn.execute(
                    "UPDATE memos SET is_done = 1, updated_at = ? WHERE id = ?",
                    (datetime.utcnow().isoformat(), memo_id),
                )
                updated = cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise DatabaseError("mark_done", str(e)) from e

        if updated:
            logger.info("memo_marked_done", memo_id=memo_id)
        return updated

    async def delete_memo(self, memo_id: int) -> bool:
        """Delete a memo by ID."""
        try:
            async with self._transaction() as conn:
                cursor = await conn.execute(
                    "DELETE FROM memos WHERE id = ?", (memo_id,)
                )
                deleted = cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise DatabaseError("delete_memo", str(e)) from e

        if deleted:
            logger.info("memo_deleted", memo_id=memo_id)
        return deleted

    @staticmethod
    def _row_to_entity(row: aiosqlite.Row) -> Memo:
        """Convert a database row to a Memo entity."""
        created_at = datetime.utcnow()
        if row["created_at"]:
            try:
                created_at = datetime.fromisoformat(row["created_at"])
            except (ValueError, TypeError):
                pass

        updated_at = created_at
        if row["updated_at"]:
            try:
                updated_at = datetime.fromisoformat(row["updated_at"])
            except (ValueError, TypeError):
                pass

        return Memo(
            id=row["id"],
            user_id=row["user_id"],
            organization_id=row["organization_id"],
            title=row["title"],
            description=row["description"],
            due_date=date.fromisoformat(row["due_date"]),
            due_time=row["due_time"],
            is_done=bool(row["is_done"]),
            created_at=created_at,
            updated_at=updated_at,
        )
