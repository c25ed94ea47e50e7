"""
Abstract interface for memo storage.

Defines the contract used by the automatic reminder flow to persist
follow-up memos, plus the queries callers need to read them back.
"""

from abc import ABC, abstractmethod
from datetime import date

from src.core.entities.memo import Memo


class IMemoStore(ABC):
    """Abstract interface for memo storage."""

    @abstractmethod
    async def create_memo(
        self,
        user_id: str,
        organization_id: str,
        title: str,
        description: str | None,
        due_date: date,
        due_time: str,
    ) -> Memo:
        """Create a memo due on ``due_date`` at ``due_time`` (HH:MM)."""

    @abstractmethod
    async def get_memo(self, memo_id: int) -> Memo | None:
        """Get memo by ID."""

    @abstractmethod
    async def list_memos(
        self,
        user_id: str,
        organization_id: str,
        include_done: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Memo]:
        """List a user's memos ordered by due date and time."""

    @abstractmethod
    async def mark_done(self, memo_id: int) -> bool:
        """Mark a memo as done. Returns False if it does not exist."""

    @abstractmethod
    async def delete_memo(self, memo_id: int) -> bool:
        """Delete a memo by ID."""
