"""Pydantic configuration models for SnapFlow."""

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class DatabaseConfig(BaseModel):
    """SQLite database configuration."""

    path: Path = Path("./data/database.sqlite")
    journal_mode: Literal["DELETE", "WAL"] = "DELETE"

    @field_validator("path", mode="before")
    @classmethod
    def expand_path(cls, v: Path | str) -> Path:
        """Expand user path."""
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser()


class MigrationConfig(BaseModel):
    """Migration runner configuration."""

    table_name: str = "migrations"
    atomic: bool = True
    # Enforcement on the CLI connection; the runner suspends it while
    # migrations are applied and restores it afterwards.
    foreign_keys: bool = True

    @field_validator("table_name")
    @classmethod
    def validate_table_name(cls, v: str) -> str:
        """Ledger table name is interpolated into DDL, so restrict it."""
        if not _IDENTIFIER.match(v):
            raise ValueError(f"table_name must be a plain SQL identifier, got {v!r}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for SnapFlow."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    migrations: MigrationConfig = Field(default_factory=MigrationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "SNAPFLOW_",
        "env_nested_delimiter": "__",
    }
