"""Tests for DbSessionPort protocol."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import pytest

from snapflow.migrations.catalog import MigrationCatalog
from snapflow.migrations.runner import MigrationRunner
from snapflow.models.migration import MigrationDefinition
from snapflow.storage.database import Database

if TYPE_CHECKING:
    from snapflow.ports.db_session import DbSessionPort


class RecordingSession:
    """In-memory DbSessionPort that records what the runner sends it."""

    def __init__(self) -> None:
        self.statements: list[str] = []
        self.ledger: list[str] = []
        self.commits = 0
        self.rollbacks = 0

    async def execute(self, sql: str, params: list[Any] | None = None) -> Any:
        self.statements.append(sql.strip().split()[0].upper())
        if sql.lstrip().upper().startswith("INSERT INTO MIGRATIONS"):
            self.ledger.append(params[0])
        return MagicMock()

    async def executescript(self, script: str) -> None:
        self.statements.append("SCRIPT")

    async def fetchone(self, sql: str, params: list[Any] | None = None) -> Any | None:
        return None

    async def fetchall(self, sql: str, params: list[Any] | None = None) -> list[Any]:
        return [(i, name, "2026-01-01 00:00:00") for i, name in enumerate(self.ledger, 1)]

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1

    @asynccontextmanager
    async def transaction(self, script: str | None = None) -> AsyncIterator[None]:
        if script is not None:
            self.statements.append("SCRIPT")
        try:
            yield
        except Exception:
            self.rollbacks += 1
            raise
        self.commits += 1


@pytest.mark.asyncio
async def test_db_session_port_protocol() -> None:
    """Any object with the port's methods can stand in for a session."""
    session: DbSessionPort = RecordingSession()

    await session.execute("SELECT 1")
    await session.fetchone("SELECT 1")
    await session.fetchall("SELECT 1")
    await session.executescript("SELECT 1;")
    await session.commit()
    await session.rollback()

    async with session.transaction():
        pass


@pytest.mark.asyncio
async def test_runner_accepts_any_session() -> None:
    """The runner only talks to the port, never to aiosqlite directly."""
    session = RecordingSession()
    catalog = MigrationCatalog(
        [
            MigrationDefinition(name="001_a", body="CREATE TABLE a (id INTEGER);"),
            MigrationDefinition(name="002_b", body="CREATE TABLE b (id INTEGER);"),
        ]
    )

    result = await MigrationRunner(session, catalog).run()

    assert result.applied == ["001_a", "002_b"]
    assert session.ledger == ["001_a", "002_b"]
    assert session.statements.count("SCRIPT") == 2
    assert session.rollbacks == 0


@pytest.mark.asyncio
async def test_database_implements_port(db: Database) -> None:
    session: DbSessionPort = db

    async with session.transaction(script="CREATE TABLE t (id INTEGER);"):
        await session.execute("INSERT INTO t (id) VALUES (?)", [1])

    row = await session.fetchone("SELECT COUNT(*) FROM t")
    assert row[0] == 1
