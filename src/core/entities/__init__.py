"""Core domain entities."""

from src.core.entities.contract import (
    ContractCategory,
    ContractSnapshot,
    RenewalStatus,
)
from src.core.entities.memo import Memo
from src.core.entities.reminder import ReminderOutcome, ReminderTemplate

__all__ = [
    # Contract entities
    "ContractCategory",
    "ContractSnapshot",
    "RenewalStatus",
    # Reminder entities
    "ReminderTemplate",
    "ReminderOutcome",
    # Memo entities
    "Memo",
]
