"""
Migration runner: applies pending catalog entries in order.

Responsibilities:
1. Suspend foreign key enforcement and ensure the ledger table exists
2. Read the names already applied
3. Walk the catalog in declared order, skipping applied names
4. Execute each pending body and record it in the ledger
5. Stop at the first failure and propagate it
"""

from loguru import logger

from snapflow.errors import (
    DuplicateMigrationError,
    MigrationError,
    MigrationExecutionError,
    PartialApplicationError,
)
from snapflow.migrations.catalog import MigrationCatalog, pending_migrations, unknown_migrations
from snapflow.migrations.ledger import DEFAULT_TABLE_NAME, MigrationLedger
from snapflow.models.migration import (
    MigrationDefinition,
    MigrationRecord,
    MigrationStatus,
    RunResult,
)
from snapflow.ports.db_session import DbSessionPort


class MigrationRunner:
    """
    Applies a migration catalog against a database session.

    Usage:
        runner = MigrationRunner(db, CATALOG)
        result = await runner.run()

    With atomic=True (the default) each body and its ledger insert
    share one transaction, so a migration is either fully applied and
    recorded or not applied at all. With atomic=False the body commits
    on its own before the ledger insert; a failed insert then leaves
    the migration applied but unrecorded and raises
    PartialApplicationError.
    """

    def __init__(
        self,
        session: DbSessionPort,
        catalog: MigrationCatalog,
        ledger: MigrationLedger | None = None,
        *,
        atomic: bool = True,
    ) -> None:
        self.session = session
        self.catalog = catalog
        self.ledger = ledger or MigrationLedger(session)
        self.atomic = atomic

    async def run(self) -> RunResult:
        """
        Apply all pending migrations.

        Foreign key enforcement is suspended for the duration of the run
        and restored afterwards. Table rebuilds drop tables that others
        reference, and with enforcement on SQLite deletes their rows
        through ON DELETE CASCADE.

        Returns:
            RunResult listing applied and skipped names.

        Raises:
            LedgerUnavailableError: Ledger cannot be created or read.
            MigrationExecutionError: A body failed.
            DuplicateMigrationError: Ledger already has the name.
            PartialApplicationError: Non-atomic body committed, record failed.
            MigrationError: Foreign keys cannot be disabled (open transaction).
        """
        restore_foreign_keys = await self._suspend_foreign_keys()
        try:
            return await self._run()
        finally:
            if restore_foreign_keys:
                await self.session.execute("PRAGMA foreign_keys = ON")
                logger.debug("Foreign key enforcement restored")

    async def _run(self) -> RunResult:
        await self.ledger.ensure_ledger()
        applied = await self.ledger.applied_names()
        applied_set = set(applied)
        logger.debug("Applied migrations: {}", applied)

        pending = pending_migrations(self.catalog, applied_set)
        if not pending:
            logger.info("All {} migrations up to date", len(self.catalog))
            return RunResult(skipped=[d.name for d in self.catalog if d.name in applied_set])

        logger.info("Found {} pending migration(s)", len(pending))

        result = RunResult()
        for definition in self.catalog:
            if definition.name in applied_set:
                logger.debug("Skipping migration {} (already applied)", definition.name)
                result.skipped.append(definition.name)
                continue

            with logger.contextualize(migration=definition.name):
                logger.info("Applying migration {}", definition.name)
                try:
                    await self._apply(definition)
                except MigrationError as e:
                    logger.error(
                        "Failed to apply migration {}: {}", definition.name, e.__cause__ or e
                    )
                    raise

                result.applied.append(definition.name)
                logger.info("Applied migration {}", definition.name)

        logger.info("Successfully applied {} migration(s)", result.executed)
        return result

    async def plan(self) -> list[MigrationDefinition]:
        """Pending definitions in catalog order. Read-only."""
        records = await self._applied_records()
        return pending_migrations(self.catalog, [record.name for record in records])

    async def status(self) -> MigrationStatus:
        """
        Compare the catalog against the ledger.

        Read-only: a database without a ledger reports every catalog
        entry as pending and does not get a ledger table.

        Returns:
            MigrationStatus with applied records, pending and unknown names.
        """
        records = await self._applied_records()
        names = [record.name for record in records]

        unknown = unknown_migrations(self.catalog, names)
        for name in unknown:
            logger.warning("Ledger records migration {} which is not in the catalog", name)

        return MigrationStatus(
            applied=records,
            pending=[d.name for d in pending_migrations(self.catalog, names)],
            unknown=unknown,
        )

    async def _applied_records(self) -> list[MigrationRecord]:
        if not await self.ledger.exists():
            return []
        return await self.ledger.list_applied()

    async def _suspend_foreign_keys(self) -> bool:
        """Turn foreign key enforcement off; True if it was on."""
        row = await self.session.fetchone("PRAGMA foreign_keys")
        if row is None or not row[0]:
            return False

        await self.session.execute("PRAGMA foreign_keys = OFF")
        # The pragma is a no-op inside an open transaction
        row = await self.session.fetchone("PRAGMA foreign_keys")
        if row is not None and row[0]:
            raise MigrationError(
                "Cannot disable foreign key enforcement: the session has an open transaction"
            )

        logger.debug("Foreign key enforcement suspended for the migration run")
        return True

    async def _apply(self, definition: MigrationDefinition) -> None:
        if self.atomic:
            await self._execute(definition, record=True)
            return

        await self._execute(definition, record=False)
        try:
            await self.ledger.record_applied(definition.name)
            await self.session.commit()
        except DuplicateMigrationError as e:
            await self.session.rollback()
            self._log_partial(definition.name, e)
            raise
        except Exception as e:
            await self.session.rollback()
            self._log_partial(definition.name, e)
            raise PartialApplicationError(definition.name, e) from e

    @staticmethod
    def _log_partial(name: str, cause: BaseException) -> None:
        logger.error(
            "PARTIAL APPLICATION: migration {} changed the schema but was not "
            "recorded in the ledger; repair manually before re-running: {}",
            name,
            cause,
        )

    async def _execute(self, definition: MigrationDefinition, *, record: bool) -> None:
        """Run one body in its own transaction, optionally with its ledger insert."""
        script = definition.body if definition.is_script else None
        try:
            async with self.session.transaction(script=script):
                if script is None:
                    await definition.body(self.session)
                if record:
                    await self.ledger.record_applied(definition.name)
        except MigrationError:
            raise
        except Exception as e:
            raise MigrationExecutionError(definition.name, e) from e


async def run_migrations(
    session: DbSessionPort,
    catalog: MigrationCatalog | None = None,
    *,
    atomic: bool = True,
    table_name: str = DEFAULT_TABLE_NAME,
) -> RunResult:
    """
    Apply the SnapFlow catalog (or a given one) to an open session.

    Entry point for hosting processes that run migrations at startup.
    """
    if catalog is None:
        from snapflow.migrations.versions import CATALOG

        catalog = CATALOG

    runner = MigrationRunner(session, catalog, MigrationLedger(session, table_name), atomic=atomic)
    return await runner.run()
