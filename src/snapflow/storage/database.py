"""SQLite database session for SnapFlow."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import aiosqlite
from loguru import logger

from snapflow.errors import StorageError


class Database:
    """
    Single aiosqlite connection implementing DbSessionPort.

    Handles:
    - Connection lifecycle and per-connection pragmas
    - Statement and script execution
    - Explicit transactions, optionally opened by a script
    """

    def __init__(
        self,
        db_path: Path | str,
        *,
        foreign_keys: bool = True,
        journal_mode: str = "DELETE",
    ) -> None:
        """
        Initialize Database.

        Args:
            db_path: Path to SQLite database file.
            foreign_keys: Enforce foreign key constraints on this connection.
            journal_mode: SQLite journal mode (DELETE or WAL).
        """
        self.db_path = Path(db_path)
        self.foreign_keys = foreign_keys
        self.journal_mode = journal_mode
        self._conn: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        """
        Open the database connection.

        Creates the database file and its parent directory if they don't exist.

        Raises:
            StorageError: If the database cannot be opened or configured.
        """
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._conn = await aiosqlite.connect(self.db_path)
            self._conn.row_factory = aiosqlite.Row

            fk = "ON" if self.foreign_keys else "OFF"
            await self._conn.execute(f"PRAGMA foreign_keys = {fk}")
            await self._conn.execute(f"PRAGMA journal_mode = {self.journal_mode}")
        except aiosqlite.Error as e:
            await self.close()
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e

        logger.debug(
            "Database opened: {} (foreign_keys={}, journal_mode={})",
            self.db_path,
            self.foreign_keys,
            self.journal_mode,
        )

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def __aenter__(self) -> "Database":
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _get_conn(self) -> aiosqlite.Connection:
        """Get database connection, raising if not initialized."""
        if not self._conn:
            raise RuntimeError("Database not initialized")
        return self._conn

    @asynccontextmanager
    async def transaction(self, script: str | None = None) -> AsyncIterator[None]:
        """
        Context manager for an explicit transaction.

        Commits on success, rollbacks on exception. When a script is
        given it runs inside the transaction as its first work: the
        script is sent in the same batch as BEGIN because sqlite3's
        executescript commits any open transaction before running.
        Scripts must not contain their own BEGIN/COMMIT.
        """
        conn = self._get_conn()

        try:
            if script is None:
                await conn.execute("BEGIN")
            else:
                await conn.executescript(f"BEGIN;\n{script}")
            yield
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    async def commit(self) -> None:
        """Commit the current transaction, if any."""
        await self._get_conn().commit()

    async def rollback(self) -> None:
        """Roll back the current transaction, if any."""
        await self._get_conn().rollback()

    async def execute(self, sql: str, params: list[Any] | None = None) -> aiosqlite.Cursor:
        """Execute a SQL statement."""
        conn = self._get_conn()
        return await conn.execute(sql, params or [])

    async def executescript(self, script: str) -> None:
        """Execute a batch of SQL statements outside any transaction."""
        conn = self._get_conn()
        await conn.executescript(script)

    async def fetchone(self, sql: str, params: list[Any] | None = None) -> aiosqlite.Row | None:
        """Execute query and fetch one row."""
        cursor = await self.execute(sql, params)
        return await cursor.fetchone()

    async def fetchall(self, sql: str, params: list[Any] | None = None) -> list[aiosqlite.Row]:
        """Execute query and fetch all rows."""
        cursor = await self.execute(sql, params)
        result = await cursor.fetchall()
        return list(result) if result else []

    async def table_columns(self, table: str) -> list[str]:
        """Column names of a table, in declaration order."""
        rows = await self.fetchall(f"PRAGMA table_info({table})")
        return [row[1] for row in rows]

    async def foreign_key_violations(self) -> list[aiosqlite.Row]:
        """Rows reported by PRAGMA foreign_key_check (table, rowid, parent, fkid)."""
        return await self.fetchall("PRAGMA foreign_key_check")
