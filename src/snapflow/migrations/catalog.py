"""Ordered, append-only catalog of migration definitions."""

from collections.abc import Collection, Iterable, Iterator

from snapflow.errors import CatalogError
from snapflow.models.migration import MigrationDefinition


class MigrationCatalog:
    """
    Immutable ordered sequence of migration definitions.

    Order is the construction order and is never re-sorted: later
    migrations may depend on structures created by earlier ones.
    """

    def __init__(self, definitions: Iterable[MigrationDefinition]) -> None:
        self._definitions: tuple[MigrationDefinition, ...] = tuple(definitions)
        self._by_name: dict[str, MigrationDefinition] = {}

        for definition in self._definitions:
            if definition.name in self._by_name:
                raise CatalogError(
                    f"Duplicate migration name in catalog: {definition.name}",
                    name=definition.name,
                )
            self._by_name[definition.name] = definition

    def __iter__(self) -> Iterator[MigrationDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"<MigrationCatalog {len(self)} migrations>"

    @property
    def names(self) -> list[str]:
        """Definition names in declared order."""
        return [d.name for d in self._definitions]

    def get(self, name: str) -> MigrationDefinition | None:
        """Look up a definition by name."""
        return self._by_name.get(name)


def pending_migrations(
    catalog: Iterable[MigrationDefinition], applied_names: Collection[str]
) -> list[MigrationDefinition]:
    """
    Declared minus applied, in catalog order.

    Skip detection is by name only; body content is never compared.
    """
    applied = set(applied_names)
    return [d for d in catalog if d.name not in applied]


def unknown_migrations(catalog: MigrationCatalog, applied_names: Iterable[str]) -> list[str]:
    """Applied names that the catalog does not declare, in ledger order."""
    return [name for name in applied_names if name not in catalog]
