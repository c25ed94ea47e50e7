"""Tests for memo schema migrations."""

from pathlib import Path

import aiosqlite
import pytest

from src.core.exceptions import MigrationError
from src.infrastructure.storage.sqlite.migrations.migrator import (
    REQUIRED_TABLES,
    applied_versions,
    load_migrations,
    migrate,
    schema_status,
)


@pytest.fixture
def scripts(tmp_path: Path) -> Path:
    """Empty migrations directory the test fills in."""
    path = tmp_path / "scripts"
    path.mkdir()
    return path


class TestLoadMigrations:
    """Tests for load_migrations()."""

    def test_bundled_memo_schema(self):
        migrations = load_migrations()

        assert migrations[0].version == 1
        assert migrations[0].name == "memos"
        assert migrations[0].label == "v001_memos"
        assert "CREATE TABLE IF NOT EXISTS memos" in migrations[0].sql
        assert all(m.version for m in migrations)

    def test_ordered_by_version_not_name(self, scripts: Path):
        (scripts / "v010_late.sql").write_text("SELECT 10;")
        (scripts / "v002_early.sql").write_text("SELECT 2;")

        assert [m.version for m in load_migrations(scripts)] == [2, 10]

    def test_badly_named_files_ignored(self, scripts: Path):
        (scripts / "v001_ok.sql").write_text("SELECT 1;")
        (scripts / "vnext_memos.sql").write_text("SELECT 2;")

        assert [m.name for m in load_migrations(scripts)] == ["ok"]

    def test_checksum_follows_content(self, scripts: Path):
        path = scripts / "v001_memos.sql"
        path.write_text("SELECT 1;")
        before = load_migrations(scripts)[0].checksum
        path.write_text("SELECT 2;")

        assert load_migrations(scripts)[0].checksum != before
        assert len(before) == 16


class TestMigrate:
    """Tests for migrate()."""

    @pytest.mark.asyncio
    async def test_fresh_database_gets_memo_table(self, temp_db_path: Path):
        applied = await migrate(temp_db_path)

        assert [m.label for m in applied] == ["v001_memos"]
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute(
                "INSERT INTO memos (user_id, organization_id, title, due_date, due_time) "
                "VALUES ('u', 'o', 'Avez-vous fait la RIA ?', '2026-03-10', '08:05')"
            )
            assert 1 in await applied_versions(conn)

    @pytest.mark.asyncio
    async def test_up_to_date_database_is_left_alone(self, temp_db_path: Path):
        await migrate(temp_db_path)

        assert await migrate(temp_db_path) == []

    @pytest.mark.asyncio
    async def test_only_pending_versions_run(self, scripts: Path, temp_db_path: Path):
        (scripts / "v001_memos.sql").write_text("CREATE TABLE memos (id INTEGER);")
        await migrate(temp_db_path, scripts)
        (scripts / "v002_memo_tags.sql").write_text("CREATE TABLE memo_tags (id INTEGER);")

        applied = await migrate(temp_db_path, scripts)

        assert [m.version for m in applied] == [2]

    @pytest.mark.asyncio
    async def test_failure_raises_and_keeps_earlier_versions(
        self, scripts: Path, temp_db_path: Path
    ):
        (scripts / "v001_memos.sql").write_text("CREATE TABLE memos (id INTEGER);")
        (scripts / "v002_broken.sql").write_text("CREATE TABLE oops (;")
        (scripts / "v003_never.sql").write_text("CREATE TABLE never (id INTEGER);")

        with pytest.raises(MigrationError) as exc_info:
            await migrate(temp_db_path, scripts)

        assert exc_info.value.details["version"] == 2
        async with aiosqlite.connect(temp_db_path) as conn:
            assert set(await applied_versions(conn)) == {1}

    @pytest.mark.asyncio
    async def test_edited_script_is_not_rerun(self, scripts: Path, temp_db_path: Path):
        script = scripts / "v001_memos.sql"
        script.write_text("CREATE TABLE memos (id INTEGER);")
        await migrate(temp_db_path, scripts)
        script.write_text("CREATE TABLE memos (id INTEGER, extra TEXT);")

        assert await migrate(temp_db_path, scripts) == []

    @pytest.mark.asyncio
    async def test_no_ledger_means_nothing_applied(self, temp_db_path: Path):
        async with aiosqlite.connect(temp_db_path) as conn:
            assert await applied_versions(conn) == {}


class TestSchemaStatus:
    """Tests for schema_status()."""

    @pytest.mark.asyncio
    async def test_missing_database(self, temp_db_path: Path):
        status = await schema_status(temp_db_path)

        assert status["exists"] is False
        assert 1 in status["pending"]
        assert status["missing_tables"] == list(REQUIRED_TABLES)
        assert not temp_db_path.exists()

    @pytest.mark.asyncio
    async def test_migrated_database(self, temp_db_path: Path):
        await migrate(temp_db_path)

        status = await schema_status(temp_db_path)

        assert status["exists"] is True
        assert 1 in status["applied"]
        assert status["pending"] == []
        assert status["missing_tables"] == []

    @pytest.mark.asyncio
    async def test_foreign_database(self, temp_db_path: Path):
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute("CREATE TABLE contracts (id INTEGER)")
            await conn.commit()

        status = await schema_status(temp_db_path)

        assert status["applied"] == []
        assert set(status["missing_tables"]) == {"memos", "schema_migrations"}
