"""
Application layer - Use cases and service factories.

This layer orchestrates business logic by:
1. Implementing use cases that coordinate core services
2. Providing factory functions for dependency injection

Use cases are the only entry point for callers.
"""

from src.application.services import (
    get_automatic_reminder_service,
    reset_services,
)
from src.application.use_cases import CreateAutomaticReminderUseCase

__all__ = [
    # Use Cases
    "CreateAutomaticReminderUseCase",
    # Service factories
    "get_automatic_reminder_service",
    "reset_services",
]
