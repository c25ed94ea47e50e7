"""
Domain exceptions for the contract reminders application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class ContractReminderError(Exception):
    """Base exception for all contract reminder errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to a serializable dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(ContractReminderError):
    """Base exception for storage operations."""

    pass


class MemoNotFoundError(StorageError):
    """Memo not found in storage."""

    def __init__(self, memo_id: int):
        super().__init__(
            f"Memo not found: {memo_id}",
            code="MEMO_NOT_FOUND",
            details={"memo_id": memo_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(ContractReminderError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class MigrationError(StorageError):
    """A schema migration could not be applied."""

    def __init__(self, version: int, name: str, error: str):
        super().__init__(
            f"Migration v{version:03d}_{name} failed: {error}",
            code="MIGRATION_ERROR",
            details={"version": version, "name": name, "error": error},
        )


# Classification Exceptions
class ClassificationError(ContractReminderError):
    """Contract classification rules are unusable."""

    def __init__(self, pattern: str, error: str):
        super().__init__(
            f"Invalid classification rule {pattern!r}: {error}",
            code="CLASSIFICATION_ERROR",
            details={"pattern": pattern, "error": error},
        )


# Configuration Exceptions
class ConfigurationError(ContractReminderError):
    """Application configuration is invalid."""

    def __init__(self, setting: str, message: str):
        super().__init__(
            f"Invalid setting '{setting}': {message}",
            code="CONFIGURATION_ERROR",
            details={"setting": setting, "message": message},
        )
