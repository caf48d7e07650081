"""CLI entry point for SnapFlow.

Provides commands for applying schema migrations and
inspecting which migrations have been applied.
"""

import asyncio
import sys
from pathlib import Path

import click

from snapflow import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """SnapFlow schema migrations.

    Applies the ordered catalog of schema and data migrations
    for the SnapFlow catalog and project-planning database.
    """
    pass


@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="List pending migrations without applying them",
)
@click.option(
    "--non-atomic",
    is_flag=True,
    help="Commit each migration before recording it in the ledger",
)
def migrate(config: Path | None, dry_run: bool, non_atomic: bool) -> None:
    """Apply pending migrations.

    Exits with status 1 and names the failing migration if any
    migration cannot be applied. Migrations applied before the
    failure stay applied; re-run to retry the rest.
    """
    from loguru import logger

    from snapflow.config.loader import load_config
    from snapflow.errors import MigrationError, StorageError
    from snapflow.migrations.ledger import MigrationLedger
    from snapflow.migrations.runner import MigrationRunner
    from snapflow.migrations.versions import CATALOG
    from snapflow.storage.database import Database
    from snapflow.utils.logging import configure_logging

    cfg = load_config(config, {"migrations": {"atomic": False}} if non_atomic else None)
    configure_logging(cfg.logging)

    async def main() -> None:
        db = Database(
            cfg.database.path,
            foreign_keys=cfg.migrations.foreign_keys,
            journal_mode=cfg.database.journal_mode,
        )
        await db.initialize()

        try:
            ledger = MigrationLedger(db, cfg.migrations.table_name)
            runner = MigrationRunner(db, CATALOG, ledger, atomic=cfg.migrations.atomic)

            if dry_run:
                pending = await runner.plan()
                if not pending:
                    click.echo("Database is up to date")
                    return
                click.echo(f"{len(pending)} pending migration(s):")
                for definition in pending:
                    click.echo(f"  {definition.name}")
                return

            result = await runner.run()
            if result.executed:
                click.echo(f"Applied {result.executed} migration(s)")
                for name in result.applied:
                    click.echo(f"  [OK] {name}")
            else:
                click.echo("Database is up to date")

            for row in await db.foreign_key_violations():
                logger.warning(
                    "Foreign key violation: table={} rowid={} parent={}", row[0], row[1], row[2]
                )
        finally:
            await db.close()

    try:
        asyncio.run(main())
    except MigrationError as e:
        if e.name:
            click.echo(f"Migration failed: {e.name}: {e.__cause__ or e}", err=True)
        else:
            click.echo(f"Migration failed: {e}", err=True)
        sys.exit(1)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
def status(config: Path | None) -> None:
    """Show applied and pending migrations.

    Read-only: never creates the database or its ledger table.
    """
    from snapflow.config.loader import load_config
    from snapflow.errors import SnapflowError
    from snapflow.migrations.ledger import MigrationLedger
    from snapflow.migrations.runner import MigrationRunner
    from snapflow.migrations.versions import CATALOG
    from snapflow.storage.database import Database

    cfg = load_config(config)

    async def main() -> None:
        db_path = cfg.database.path

        if not db_path.exists():
            click.echo("Database not initialized. Run 'snapflow migrate' first.")
            return

        db = Database(
            db_path,
            foreign_keys=cfg.migrations.foreign_keys,
            journal_mode=cfg.database.journal_mode,
        )
        await db.initialize()

        try:
            runner = MigrationRunner(db, CATALOG, MigrationLedger(db, cfg.migrations.table_name))
            state = await runner.status()
        finally:
            await db.close()

        click.echo(f"\nMigration Status ({db_path}):")
        click.echo("-" * 60)

        click.echo(f"\nApplied: {len(state.applied)}")
        for record in state.applied:
            click.echo(f"  {record.name}  {record.applied_at:%Y-%m-%d %H:%M:%S}")

        click.echo(f"\nPending: {len(state.pending)}")
        for name in state.pending:
            click.echo(f"  {name}")

        if state.unknown:
            click.echo(f"\nNot in catalog: {len(state.unknown)}")
            for name in state.unknown:
                click.echo(f"  {name}")

    try:
        asyncio.run(main())
    except SnapflowError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
