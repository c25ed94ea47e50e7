"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.automatic_reminders import AutomaticReminderService
from src.core.services.contract_classifier import (
    KeywordContractClassifier,
    get_category_display_name,
    get_contract_category,
)
from src.core.services.reminder_rules import (
    REMINDER_RULES,
    get_reminder_for_borrower_insurance,
    get_reminder_for_health_mutual,
    get_reminder_for_life_insurance,
    get_reminder_for_provident,
    get_reminder_for_retirement_plan,
    select_reminder,
)

__all__ = [
    # Automatic reminders
    "AutomaticReminderService",
    # Classification
    "KeywordContractClassifier",
    "get_contract_category",
    "get_category_display_name",
    # Reminder rules
    "REMINDER_RULES",
    "select_reminder",
    "get_reminder_for_retirement_plan",
    "get_reminder_for_life_insurance",
    "get_reminder_for_health_mutual",
    "get_reminder_for_provident",
    "get_reminder_for_borrower_insurance",
]
