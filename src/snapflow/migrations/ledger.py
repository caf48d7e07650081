"""Durable record of applied migrations."""

from datetime import UTC, datetime

import aiosqlite
from loguru import logger

from snapflow.errors import DuplicateMigrationError, LedgerUnavailableError
from snapflow.models.migration import MigrationRecord
from snapflow.ports.db_session import DbSessionPort

DEFAULT_TABLE_NAME = "migrations"


class MigrationLedger:
    """
    Ledger table tracking which migrations have completed.

    One row per applied migration: an autoincrement id (insertion
    order), the unique migration name, and the time it was recorded.
    Rows are never updated or deleted here.
    """

    def __init__(self, session: DbSessionPort, table_name: str = DEFAULT_TABLE_NAME) -> None:
        """
        Initialize MigrationLedger.

        Args:
            session: Open database session.
            table_name: Ledger table name (a validated plain identifier).
        """
        self.session = session
        self.table_name = table_name

    async def ensure_ledger(self) -> None:
        """
        Create the ledger table if it doesn't exist.

        Safe to call on every startup. Does not read or write rows.

        Raises:
            LedgerUnavailableError: If the table cannot be created.
        """
        try:
            await self.session.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self.table_name} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL UNIQUE,
                    applied_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            await self.session.commit()
        except aiosqlite.Error as e:
            raise LedgerUnavailableError(
                f"Cannot create ledger table {self.table_name}: {e}"
            ) from e

        logger.debug("Ledger table ready: {}", self.table_name)

    async def exists(self) -> bool:
        """True if the ledger table (or anything squatting on its name) exists."""
        try:
            row = await self.session.fetchone(
                "SELECT 1 FROM sqlite_master WHERE type IN ('table', 'view') AND name = ?",
                [self.table_name],
            )
        except aiosqlite.Error as e:
            raise LedgerUnavailableError(
                f"Cannot inspect ledger table {self.table_name}: {e}"
            ) from e
        return row is not None

    async def list_applied(self) -> list[MigrationRecord]:
        """
        Get all applied migrations in the order they were applied.

        Raises:
            LedgerUnavailableError: If the ledger cannot be queried.
        """
        try:
            rows = await self.session.fetchall(
                f"SELECT id, name, applied_at FROM {self.table_name} ORDER BY id"
            )
        except aiosqlite.Error as e:
            raise LedgerUnavailableError(f"Cannot read ledger table {self.table_name}: {e}") from e

        return [self._row_to_record(row) for row in rows]

    async def applied_names(self) -> list[str]:
        """Names of applied migrations, in application order."""
        return [record.name for record in await self.list_applied()]

    async def record_applied(self, name: str) -> None:
        """
        Insert the ledger row for a migration.

        Does not commit; the caller owns the unit of work.

        Raises:
            DuplicateMigrationError: If the name is already recorded.
            LedgerUnavailableError: On any other storage failure.
        """
        try:
            await self.session.execute(
                f"INSERT INTO {self.table_name} (name) VALUES (?)",
                [name],
            )
        except aiosqlite.IntegrityError as e:
            raise DuplicateMigrationError(name) from e
        except aiosqlite.Error as e:
            raise LedgerUnavailableError(
                f"Cannot record migration {name}: {e}", name=name
            ) from e

    def _row_to_record(self, row: aiosqlite.Row) -> MigrationRecord:
        """Convert a ledger row to MigrationRecord.

        SQLite's CURRENT_TIMESTAMP is UTC text without an offset.
        """
        applied_at = row[2]
        if isinstance(applied_at, str):
            applied_at = datetime.fromisoformat(applied_at)
        if applied_at.tzinfo is None:
            applied_at = applied_at.replace(tzinfo=UTC)

        return MigrationRecord(sequence_id=row[0], name=row[1], applied_at=applied_at)
