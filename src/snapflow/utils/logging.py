"""Logging configuration using loguru.

Console output goes to stderr so that command output on stdout
(migration summaries, status tables) stays clean. While a migration
is being applied the runner binds its name as ``extra["migration"]``;
console lines then carry it as a ``[name]`` tag and json records
carry it as a field.
"""

import logging
import sys
from typing import Any

from loguru import logger

from snapflow.config.models import LoggingConfig

_CONSOLE_PREFIX = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "


def _console_format(record: dict[str, Any]) -> str:
    """Loguru format template, tagged with the migration being applied."""
    tag = "<magenta>[{extra[migration]}]</magenta> " if record["extra"].get("migration") else ""
    return _CONSOLE_PREFIX + tag + "<level>{message}</level>\n{exception}"


class _StdlibBridge(logging.Handler):
    """Forward aiosqlite's stdlib log records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int = record.levelname
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            level = record.levelno
        logger.opt(exception=record.exc_info).log(
            level, "{}: {}", record.name, record.getMessage()
        )


def configure_logging(config: LoggingConfig) -> None:
    """
    Install stderr (and optional file) sinks for a migration run.

    Args:
        config: LoggingConfig with level, format, and file settings.
    """
    logger.remove()
    serialize = config.format == "json"
    fmt = "{message}" if serialize else _console_format

    logger.add(
        sys.stderr,
        format=fmt,
        level=config.level,
        serialize=serialize,
        colorize=not serialize,
    )
    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=config.level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    bridge = logging.getLogger("aiosqlite")
    bridge.handlers = [_StdlibBridge()]
    bridge.propagate = False
    bridge.setLevel(logging.WARNING if config.level != "DEBUG" else logging.DEBUG)

    logger.debug("Logging configured: level={} format={}", config.level, config.format)
