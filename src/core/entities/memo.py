"""Memo entity for user follow-up tasks."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class Memo(BaseModel):
    """
    Dated follow-up memo owned by a user within an organization.

    ``due_time`` is a local ``HH:MM`` wall-clock time.
    """

    id: int | None = None
    user_id: str
    organization_id: str
    title: str = Field(min_length=1)
    description: str | None = None
    due_date: date
    due_time: str = Field(default="09:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    is_done: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def due_at(self) -> datetime:
        """Due date and time combined as a naive local datetime."""
        hours, minutes = self.due_time.split(":")
        return datetime(
            self.due_date.year,
            self.due_date.month,
            self.due_date.day,
            int(hours),
            int(minutes),
        )

    @property
    def is_overdue(self) -> bool:
        """Check if the memo is past due and not done."""
        if self.is_done:
            return False
        return self.due_at < datetime.now()
