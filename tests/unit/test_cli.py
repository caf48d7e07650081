"""Tests for CLI entry point."""

import sqlite3
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from snapflow.__main__ import cli
from snapflow.migrations.catalog import MigrationCatalog
from snapflow.migrations.versions import CATALOG
from snapflow.models.migration import MigrationDefinition


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "snapflow.sqlite"


@pytest.fixture
def config_file(tmp_path: Path, db_file: Path) -> Path:
    """YAML config pointing at a temporary database."""
    path = tmp_path / "snapflow.yaml"
    path.write_text(f"database:\n  path: {db_file}\nlogging:\n  level: WARNING\n")
    return path


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep loguru sinks away from CliRunner's captured streams."""
    with patch("snapflow.utils.logging.configure_logging") as mock_configure:
        yield mock_configure


def _ledger_names(db_file: Path) -> list[str]:
    with sqlite3.connect(db_file) as conn:
        return [row[0] for row in conn.execute("SELECT name FROM migrations ORDER BY id")]


def _tables(db_file: Path) -> set[str]:
    with sqlite3.connect(db_file) as conn:
        return {row[0] for row in conn.execute("SELECT name FROM sqlite_master")}


def test_cli_help(runner: CliRunner) -> None:
    """Test CLI help command."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "SnapFlow schema migrations" in result.output
    assert "migrate" in result.output
    assert "status" in result.output


def test_cli_version(runner: CliRunner) -> None:
    """Test CLI version command."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_migrate_command_help(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["migrate", "--help"])
    assert result.exit_code == 0
    assert "--dry-run" in result.output
    assert "--non-atomic" in result.output


def test_migrate_missing_config_file(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["migrate", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code != 0


def test_migrate_fresh_database(runner: CliRunner, config_file: Path, db_file: Path) -> None:
    """A fresh database receives the whole catalog."""
    result = runner.invoke(cli, ["migrate", "--config", str(config_file)])

    assert result.exit_code == 0, result.output
    assert f"Applied {len(CATALOG)} migration(s)" in result.output
    assert "[OK] 001_create_users_table" in result.output
    assert "[OK] 023_rename_bom_add_project" in result.output
    assert _ledger_names(db_file) == CATALOG.names


def test_migrate_twice_is_up_to_date(runner: CliRunner, config_file: Path) -> None:
    runner.invoke(cli, ["migrate", "-c", str(config_file)])

    result = runner.invoke(cli, ["migrate", "-c", str(config_file)])

    assert result.exit_code == 0
    assert "Database is up to date" in result.output
    assert "[OK]" not in result.output


def test_migrate_configures_logging(
    runner: CliRunner, config_file: Path, no_logging_setup: MagicMock
) -> None:
    runner.invoke(cli, ["migrate", "-c", str(config_file), "--dry-run"])

    no_logging_setup.assert_called_once()
    assert no_logging_setup.call_args.args[0].level == "WARNING"


def test_migrate_dry_run_applies_nothing(
    runner: CliRunner, config_file: Path, db_file: Path
) -> None:
    result = runner.invoke(cli, ["migrate", "-c", str(config_file), "--dry-run"])

    assert result.exit_code == 0
    assert f"{len(CATALOG)} pending migration(s):" in result.output
    assert "  001_create_users_table" in result.output
    assert "migrations" not in _tables(db_file)


def test_migrate_dry_run_up_to_date(runner: CliRunner, config_file: Path) -> None:
    runner.invoke(cli, ["migrate", "-c", str(config_file)])

    result = runner.invoke(cli, ["migrate", "-c", str(config_file), "--dry-run"])

    assert result.exit_code == 0
    assert "Database is up to date" in result.output


def test_migrate_non_atomic(runner: CliRunner, config_file: Path, db_file: Path) -> None:
    result = runner.invoke(cli, ["migrate", "-c", str(config_file), "--non-atomic"])

    assert result.exit_code == 0, result.output
    assert _ledger_names(db_file) == CATALOG.names


def test_migrate_failure_exits_nonzero(
    runner: CliRunner, config_file: Path, db_file: Path
) -> None:
    """A failing body names the migration and exits with status 1."""
    broken = MigrationCatalog(
        [
            MigrationDefinition(name="001_create_t", body="CREATE TABLE t (id INTEGER);"),
            MigrationDefinition(name="002_broken", body="INSERT INTO missing VALUES (1);"),
            MigrationDefinition(name="003_never", body="CREATE TABLE u (id INTEGER);"),
        ]
    )

    with patch("snapflow.migrations.versions.CATALOG", broken):
        result = runner.invoke(cli, ["migrate", "-c", str(config_file)])

    assert result.exit_code == 1
    assert "Migration failed: 002_broken" in result.output
    assert "no such table: missing" in result.output
    assert _ledger_names(db_file) == ["001_create_t"]


def test_migrate_storage_error(runner: CliRunner, tmp_path: Path) -> None:
    """A database path that cannot be opened reports an error."""
    blocked = tmp_path / "blocked"
    blocked.mkdir()
    config_file = tmp_path / "snapflow.yaml"
    config_file.write_text(f"database:\n  path: {blocked}\n")

    result = runner.invoke(cli, ["migrate", "-c", str(config_file)])

    assert result.exit_code == 1
    assert "Error:" in result.output


@patch("snapflow.config.loader.load_config")
def test_status_command_no_db(
    mock_load_config: MagicMock,
    runner: CliRunner,
    tmp_path: Path,
) -> None:
    """Test status command when database doesn't exist."""
    mock_config = MagicMock()
    mock_config.database.path = tmp_path / "data" / "missing.sqlite"
    mock_load_config.return_value = mock_config

    result = runner.invoke(cli, ["status"])

    assert result.exit_code == 0
    assert "Database not initialized" in result.output
    mock_load_config.assert_called_once_with(None)


def test_status_after_migrate(runner: CliRunner, config_file: Path) -> None:
    runner.invoke(cli, ["migrate", "-c", str(config_file)])

    result = runner.invoke(cli, ["status", "-c", str(config_file)])

    assert result.exit_code == 0
    assert "Migration Status" in result.output
    assert f"Applied: {len(CATALOG)}" in result.output
    assert "Pending: 0" in result.output
    assert "Not in catalog" not in result.output


def test_status_reports_pending_and_unknown(
    runner: CliRunner, config_file: Path, db_file: Path
) -> None:
    runner.invoke(cli, ["migrate", "-c", str(config_file)])
    with sqlite3.connect(db_file) as conn:
        conn.execute("DELETE FROM migrations WHERE name = ?", ["023_rename_bom_add_project"])
        conn.execute("INSERT INTO migrations (name) VALUES (?)", ["000_retired"])

    result = runner.invoke(cli, ["status", "-c", str(config_file)])

    assert result.exit_code == 0
    assert f"Applied: {len(CATALOG)}" in result.output
    assert "Pending: 1" in result.output
    assert "  023_rename_bom_add_project" in result.output
    assert "Not in catalog: 1" in result.output
    assert "  000_retired" in result.output


def test_migrate_non_atomic_flag_reaches_runner(runner: CliRunner, config_file: Path) -> None:
    from snapflow.migrations.runner import MigrationRunner

    with patch(
        "snapflow.migrations.runner.MigrationRunner", wraps=MigrationRunner
    ) as mock_runner:
        result = runner.invoke(cli, ["migrate", "-c", str(config_file), "--non-atomic"])

    assert result.exit_code == 0, result.output
    assert mock_runner.call_args.kwargs["atomic"] is False


def test_migrate_relative_path_follows_config_file(runner: CliRunner, tmp_path: Path) -> None:
    """A relative database path is resolved next to the config file."""
    config_dir = tmp_path / "etc"
    config_dir.mkdir()
    config_file = config_dir / "snapflow.yaml"
    config_file.write_text("database:\n  path: db/snapflow.sqlite\n")

    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(cli, ["migrate", "-c", str(config_file)])

    assert result.exit_code == 0, result.output
    assert _ledger_names(config_dir / "db" / "snapflow.sqlite") == CATALOG.names


def test_status_does_not_create_ledger(
    runner: CliRunner, config_file: Path, db_file: Path
) -> None:
    db_file.parent.mkdir(parents=True)
    with sqlite3.connect(db_file) as conn:
        conn.execute("CREATE TABLE legacy (id INTEGER)")

    result = runner.invoke(cli, ["status", "-c", str(config_file)])

    assert result.exit_code == 0, result.output
    assert "Applied: 0" in result.output
    assert f"Pending: {len(CATALOG)}" in result.output
    assert _tables(db_file) == {"legacy"}


def test_status_unreadable_ledger_exits_nonzero(
    runner: CliRunner, config_file: Path, db_file: Path
) -> None:
    db_file.parent.mkdir(parents=True)
    with sqlite3.connect(db_file) as conn:
        conn.execute("CREATE VIEW migrations AS SELECT 1 AS x")

    result = runner.invoke(cli, ["status", "-c", str(config_file)])

    assert result.exit_code == 1
    assert "Error: Cannot read ledger table migrations" in result.output
    assert "Traceback" not in result.output
