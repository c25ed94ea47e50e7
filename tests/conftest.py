"""Pytest configuration and fixtures."""

from datetime import date, datetime
from unittest.mock import AsyncMock

import pytest

from src.config import reset_settings
from src.core.entities import ContractSnapshot, Memo

FIXED_NOW = datetime(2026, 3, 10, 8, 5, 42)


@pytest.fixture(autouse=True)
def _reset_settings():
    """Drop cached settings between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2026-03-10 08:05:42 local time."""
    return lambda: FIXED_NOW


@pytest.fixture
def memo_store() -> AsyncMock:
    """Memo store double that echoes created memos back with an ID."""
    store = AsyncMock()

    async def create_memo(
        user_id, organization_id, title, description, due_date, due_time
    ):
        return Memo(
            id=42,
            user_id=user_id,
            organization_id=organization_id,
            title=title,
            description=description,
            due_date=due_date,
            due_time=due_time,
        )

    store.create_memo = AsyncMock(side_effect=create_memo)
    return store


@pytest.fixture
def retirement_contract() -> ContractSnapshot:
    """PER subscribed while an older PER already exists."""
    return ContractSnapshot(product="PER Individuel", has_existing_retirement_plan=True)


@pytest.fixture
def borrower_contract() -> ContractSnapshot:
    """Borrower insurance contract with no flags set."""
    return ContractSnapshot(product="Emprunteur Pro")


@pytest.fixture
def sample_memo() -> Memo:
    """Create a sample memo for testing."""
    return Memo(
        user_id="user-1",
        organization_id="org-1",
        title="Appeler le client",
        description="Contrat concerné : Emprunteur Pro",
        due_date=date(2026, 3, 31),
        due_time="08:05",
    )
