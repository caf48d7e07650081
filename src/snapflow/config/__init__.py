"""Configuration management for SnapFlow."""

from snapflow.config.loader import load_config
from snapflow.config.models import Config, DatabaseConfig, LoggingConfig, MigrationConfig

__all__ = ["Config", "DatabaseConfig", "LoggingConfig", "MigrationConfig", "load_config"]
