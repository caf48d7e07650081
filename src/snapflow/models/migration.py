"""Migration models for SnapFlow schema evolution."""

from collections.abc import Callable
from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class MigrationState(StrEnum):
    """Per-definition migration state."""

    PENDING = "pending"
    APPLIED = "applied"


class MigrationDefinition(BaseModel):
    """
    One catalog entry: a stable name and an opaque body.

    The body is either a SQL script (one or more statements) or an
    async callable receiving the database session, for backfills that
    need procedural logic. Once shipped, a definition must never be
    edited or removed.
    """

    name: str = Field(min_length=1)
    body: str | Callable[..., Any]

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names are ledger keys; whitespace would make them ambiguous."""
        if any(ch.isspace() for ch in v):
            raise ValueError(f"Migration name must not contain whitespace: {v!r}")
        return v

    @property
    def is_script(self) -> bool:
        """True when the body is a SQL script."""
        return isinstance(self.body, str)

    def __str__(self) -> str:
        return f"Migration {self.name}"


class MigrationRecord(BaseModel):
    """A ledger row: one successfully applied migration."""

    sequence_id: int
    name: str
    applied_at: datetime

    model_config = {"frozen": True}


class MigrationStatus(BaseModel):
    """Comparison of the catalog against the ledger."""

    applied: list[MigrationRecord] = Field(default_factory=list)
    pending: list[str] = Field(default_factory=list)
    # Ledger names with no catalog entry
    unknown: list[str] = Field(default_factory=list)

    @property
    def is_up_to_date(self) -> bool:
        return not self.pending

    def state_of(self, name: str) -> MigrationState:
        """State of a catalog entry by name."""
        if any(record.name == name for record in self.applied):
            return MigrationState.APPLIED
        return MigrationState.PENDING


class RunResult(BaseModel):
    """Outcome of one successful runner invocation."""

    applied: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    @property
    def executed(self) -> int:
        """Number of bodies executed in this run."""
        return len(self.applied)
