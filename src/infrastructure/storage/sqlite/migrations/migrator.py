"""
Schema migrations for the memo database.

Migrations are the ``vNNN_<name>.sql`` files shipped next to this module.
Each applied version is recorded with a checksum of its script in
``schema_migrations``; pending ones are applied in version order and the
first failure aborts the run with a MigrationError.
"""

import argparse
import asyncio
import hashlib
import re
import time
from dataclasses import dataclass
from pathlib import Path

import aiosqlite

from src.config import configure_logging, get_logger, get_settings
from src.core.exceptions import MigrationError

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent

# Tables the memo store cannot work without
REQUIRED_TABLES = ("memos", "schema_migrations")

_FILENAME = re.compile(r"^v(\d{3,})_(\w+)\.sql$")

_CREATE_LEDGER = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    checksum TEXT NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (datetime('now')),
    duration_ms INTEGER NOT NULL
)
"""


@dataclass(frozen=True)
class Migration:
    """One versioned schema script."""

    version: int
    name: str
    sql: str

    @property
    def label(self) -> str:
        return f"v{self.version:03d}_{self.name}"

    @property
    def checksum(self) -> str:
        return hashlib.sha256(self.sql.encode("utf-8")).hexdigest()[:16]


def load_migrations(migrations_dir: Path = MIGRATIONS_DIR) -> list[Migration]:
    """Read every migration script in ``migrations_dir``, oldest first."""
    migrations = []
    for path in migrations_dir.glob("v*.sql"):
        match = _FILENAME.match(path.name)
        if match is None:
            logger.warning("migration_file_ignored", path=str(path))
            continue
        migrations.append(
            Migration(
                version=int(match.group(1)),
                name=match.group(2),
                sql=path.read_text(encoding="utf-8"),
            )
        )
    return sorted(migrations, key=lambda m: m.version)


async def applied_versions(conn: aiosqlite.Connection) -> dict[int, str]:
    """Map of applied version to the checksum recorded when it ran."""
    cursor = await conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_migrations'"
    )
    if await cursor.fetchone() is None:
        return {}
    cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
    return {version: checksum for version, checksum in await cursor.fetchall()}


async def _apply(conn: aiosqlite.Connection, migration: Migration) -> None:
    started = time.monotonic()
    try:
        await conn.executescript(migration.sql)
        await conn.execute(
            "INSERT INTO schema_migrations (version, name, checksum, duration_ms) "
            "VALUES (?, ?, ?, ?)",
            (
                migration.version,
                migration.name,
                migration.checksum,
                int((time.monotonic() - started) * 1000),
            ),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        raise MigrationError(migration.version, migration.name, str(e)) from e

    logger.info("migration_applied", migration=migration.label)


async def migrate(
    db_path: Path | None = None,
    migrations_dir: Path = MIGRATIONS_DIR,
) -> list[Migration]:
    """
    Bring the memo database up to date.

    Args:
        db_path: Database file (default from settings); created if missing
        migrations_dir: Directory holding the migration scripts

    Returns:
        Migrations applied by this call, empty when already up to date

    Raises:
        MigrationError: A script failed. Earlier ones in the run stay applied.
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)

    applied: list[Migration] = []
    async with aiosqlite.connect(db_path) as conn:
        await conn.execute(_CREATE_LEDGER)
        await conn.commit()
        done = await applied_versions(conn)

        for migration in load_migrations(migrations_dir):
            recorded = done.get(migration.version)
            if recorded is not None:
                if recorded != migration.checksum:
                    logger.warning("migration_changed_after_apply", migration=migration.label)
                continue
            await _apply(conn, migration)
            applied.append(migration)

    if applied:
        logger.info("memo_schema_migrated", db_path=str(db_path), applied=len(applied))
    return applied


async def schema_status(
    db_path: Path | None = None,
    migrations_dir: Path = MIGRATIONS_DIR,
) -> dict:
    """Applied and pending versions plus any required table that is missing."""
    db_path = db_path or get_settings().storage.db_path
    known = [m.version for m in load_migrations(migrations_dir)]

    if not db_path.exists():
        return {
            "exists": False,
            "applied": [],
            "pending": known,
            "missing_tables": list(REQUIRED_TABLES),
        }

    async with aiosqlite.connect(db_path) as conn:
        done = await applied_versions(conn)
        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        tables = {row[0] for row in await cursor.fetchall()}

    return {
        "exists": True,
        "applied": sorted(done),
        "pending": [v for v in known if v not in done],
        "missing_tables": [t for t in REQUIRED_TABLES if t not in tables],
    }


def main() -> None:
    """Apply pending migrations, or report the schema state with --status."""
    parser = argparse.ArgumentParser(description="Memo database migrations")
    parser.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    parser.add_argument("--status", action="store_true", help="Report without migrating")
    args = parser.parse_args()
    configure_logging()

    if args.status:
        status = asyncio.run(schema_status(args.db_path))
        print(f"exists: {status['exists']}")
        print(f"applied: {status['applied']}")
        print(f"pending: {status['pending']}")
        print(f"missing tables: {status['missing_tables']}")
        raise SystemExit(1 if status["pending"] or status["missing_tables"] else 0)

    try:
        applied = asyncio.run(migrate(args.db_path))
    except MigrationError as e:
        print(e.message)
        raise SystemExit(1) from e
    for migration in applied:
        print(f"applied {migration.label}")
    if not applied:
        print("memo schema is up to date")


if __name__ == "__main__":
    main()
