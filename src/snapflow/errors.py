"""SnapFlow error types.

All custom exceptions inherit from SnapflowError to allow
catching any SnapFlow-specific error.
"""


class SnapflowError(Exception):
    """Base exception for all SnapFlow errors."""

    pass


class StorageError(SnapflowError):
    """Database connection could not be opened or configured."""

    pass


class MigrationError(SnapflowError):
    """Base exception for migration failures."""

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class CatalogError(MigrationError):
    """Migration catalog is malformed (duplicate or invalid names)."""

    pass


class LedgerUnavailableError(MigrationError):
    """Ledger table could not be created or queried."""

    pass


class MigrationExecutionError(MigrationError):
    """A migration body raised while executing."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Migration {name} failed: {cause}", name=name)
        self.cause = cause


class DuplicateMigrationError(MigrationError):
    """Ledger already holds a record with this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Migration {name} is already recorded in the ledger", name=name)


class PartialApplicationError(MigrationError):
    """Body committed but its ledger record could not be written."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(
            f"Migration {name} was applied but not recorded: {cause}",
            name=name,
        )
        self.cause = cause
