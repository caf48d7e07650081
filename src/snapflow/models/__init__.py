"""Data models for SnapFlow."""

from snapflow.models.migration import (
    MigrationDefinition,
    MigrationRecord,
    MigrationState,
    MigrationStatus,
    RunResult,
)

__all__ = [
    "MigrationDefinition",
    "MigrationRecord",
    "MigrationState",
    "MigrationStatus",
    "RunResult",
]
