"""Memo database schema migrations."""

from src.infrastructure.storage.sqlite.migrations.migrator import (
    REQUIRED_TABLES,
    Migration,
    applied_versions,
    load_migrations,
    migrate,
    schema_status,
)

__all__ = [
    "REQUIRED_TABLES",
    "Migration",
    "applied_versions",
    "load_migrations",
    "migrate",
    "schema_status",
]
