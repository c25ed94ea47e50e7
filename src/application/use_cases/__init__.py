"""Application use cases."""

from src.application.use_cases.create_automatic_reminder import (
    CreateAutomaticReminderUseCase,
)

__all__ = [
    "CreateAutomaticReminderUseCase",
]
