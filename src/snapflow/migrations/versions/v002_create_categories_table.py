"""Catalog categories."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE categories (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    sort_order INTEGER DEFAULT 0
);
"""

MIGRATION = MigrationDefinition(name="002_create_categories_table", body=MIGRATION_SQL)
