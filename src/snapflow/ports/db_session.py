"""Port interface for database session operations."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol


class DbSessionPort(Protocol):
    """Protocol for database session operations.

    This is the connection the migration runner consumes. Its
    lifecycle (open/close) belongs to the caller.
    """

    async def execute(self, sql: str, params: list[Any] | None = None) -> Any:
        """Execute a single SQL statement.

        Args:
            sql: SQL statement to execute
            params: Optional parameter list

        Returns:
            Cursor or result object
        """
        ...

    async def executescript(self, script: str) -> None:
        """Execute a batch of SQL statements.

        Args:
            script: One or more semicolon-separated statements
        """
        ...

    async def fetchone(self, sql: str, params: list[Any] | None = None) -> Any | None:
        """Execute query and fetch one row.

        Args:
            sql: SQL query
            params: Optional parameter list

        Returns:
            Single row or None
        """
        ...

    async def fetchall(self, sql: str, params: list[Any] | None = None) -> list[Any]:
        """Execute query and fetch all rows.

        Args:
            sql: SQL query
            params: Optional parameter list

        Returns:
            List of rows
        """
        ...

    async def commit(self) -> None:
        """Commit the current transaction, if any."""
        ...

    async def rollback(self) -> None:
        """Roll back the current transaction, if any."""
        ...

    @asynccontextmanager
    async def transaction(self, script: str | None = None) -> AsyncIterator[None]:
        """Start an explicit transaction context.

        Commits on success, rolls back on exception.

        Args:
            script: Optional SQL script executed as the first work
                inside the transaction.

        Yields:
            None (context manager)
        """
        yield
