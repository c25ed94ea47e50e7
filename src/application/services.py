"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.
"""

from typing import TYPE_CHECKING

from src.core.services import AutomaticReminderService

if TYPE_CHECKING:
    from src.core.interfaces import IContractClassifier, IMemoStore


# Singleton service instance
_automatic_reminder_service: AutomaticReminderService | None = None


async def get_automatic_reminder_service(
    memo_store: "IMemoStore | None" = None,
    classifier: "IContractClassifier | None" = None,
) -> AutomaticReminderService:
    """
    Get or create AutomaticReminderService instance.

    Overrides bypass the singleton and build a fresh service.

    Args:
        memo_store: Optional memo store override
        classifier: Optional classifier override

    Returns:
        Configured AutomaticReminderService
    """
    global _automatic_reminder_service

    if memo_store is not None or classifier is not None:
        if memo_store is None:
            from src.infrastructure.storage.sqlite import get_memo_store
            memo_store = await get_memo_store()
        return AutomaticReminderService(memo_store=memo_store, classifier=classifier)

    if _automatic_reminder_service is None:
        # Lazy import infrastructure to avoid circular imports
        from src.infrastructure.storage.sqlite import get_memo_store

        _automatic_reminder_service = AutomaticReminderService(
            memo_store=await get_memo_store(),
        )

    return _automatic_reminder_service


def reset_services() -> None:
    """Reset all service singletons (for testing)."""
    global _automatic_reminder_service
    _automatic_reminder_service = None
