"""Load SnapFlow settings from YAML, the environment and CLI flags."""

from pathlib import Path
from typing import Any

import yaml

from snapflow.config.models import Config

SECTIONS = ("database", "migrations", "logging")


def load_config(
    config_path: Path | None,
    overrides: dict[str, dict[str, Any]] | None = None,
) -> Config:
    """
    Build the SnapFlow configuration.

    Precedence, lowest first: model defaults, SNAPFLOW_* environment
    variables, the YAML file, then `overrides` (CLI flags such as
    --non-atomic), merged key by key within each section.

    Relative `database.path` and `logging.file` values in the YAML file
    are resolved against the file's directory, so a config works the
    same from any working directory.

    Args:
        config_path: Path to YAML config file, or None for no file.
        overrides: Per-section values that win over everything else,
            e.g. {"migrations": {"atomic": False}}.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ValueError: If the YAML is invalid or not shaped as sections.
    """
    data = _read_sections(config_path) if config_path is not None else {}

    for section, values in (overrides or {}).items():
        data[section] = {**data.get(section, {}), **values}

    return Config(**data)


def _read_sections(config_path: Path) -> dict[str, dict[str, Any]]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping, not {type(data).__name__}")

    for section, values in data.items():
        if section not in SECTIONS:
            raise ValueError(f"Unknown config section {section!r}; expected one of {SECTIONS}")
        if values is None:
            data[section] = {}
        elif not isinstance(values, dict):
            raise ValueError(f"Config section {section!r} must be a mapping")

    base = config_path.resolve().parent
    _resolve_relative(data.get("database"), "path", base)
    _resolve_relative(data.get("logging"), "file", base)
    return data


def _resolve_relative(section: dict[str, Any] | None, key: str, base: Path) -> None:
    if not section or section.get(key) is None:
        return
    path = Path(section[key]).expanduser()
    if not path.is_absolute():
        section[key] = base / path
