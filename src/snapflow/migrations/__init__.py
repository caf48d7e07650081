"""
Schema migrations for SnapFlow.

MigrationLedger records applied migrations, MigrationCatalog holds the
ordered definitions, and MigrationRunner applies whatever is pending.
The SnapFlow catalog itself lives in snapflow.migrations.versions.
"""

from snapflow.migrations.catalog import MigrationCatalog, pending_migrations
from snapflow.migrations.ledger import MigrationLedger
from snapflow.migrations.runner import MigrationRunner, run_migrations

__all__ = [
    "MigrationCatalog",
    "MigrationLedger",
    "MigrationRunner",
    "pending_migrations",
    "run_migrations",
]
