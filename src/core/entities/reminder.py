"""Reminder decision and outcome entities."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReminderTemplate(BaseModel):
    """
    Reminder chosen by a category rule, before it is scheduled.

    Pure Pydantic model, not persisted. ``days_offset`` counts calendar
    days from today; 0 means due today.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    description: str | None = None
    days_offset: int = Field(default=0, ge=0)


class ReminderOutcome(BaseModel):
    """Result handed back to the caller of the automatic reminder flow."""

    success: bool
    message: str
    reminder_created: bool = False
    memo_id: int | None = None

    @model_validator(mode="after")
    def created_implies_success(self) -> "ReminderOutcome":
        if self.reminder_created and not self.success:
            raise ValueError("a failed outcome cannot report a created reminder")
        return self
