"""Shared pytest fixtures for SnapFlow tests."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest

from snapflow.storage.database import Database


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path."""
    return tmp_path / "data" / "database.sqlite"


@pytest.fixture
async def db(db_path: Path) -> AsyncIterator[Database]:
    """Provide an initialized Database with foreign keys off."""
    database = Database(db_path, foreign_keys=False)
    await database.initialize()
    yield database
    await database.close()


@pytest.fixture
async def fk_db(db_path: Path) -> AsyncIterator[Database]:
    """Provide a Database left at its defaults (foreign keys on)."""
    database = Database(db_path)
    await database.initialize()
    yield database
    await database.close()
