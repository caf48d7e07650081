"""Catalog items, one row per cabinet or fixture."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    category_id INTEGER REFERENCES categories(id),
    name TEXT NOT NULL,
    description TEXT,
    model_number TEXT,
    dimensions TEXT,
    price REAL NOT NULL,
    image_path TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_items_category ON items(category_id);
"""

MIGRATION = MigrationDefinition(name="003_create_items_table", body=MIGRATION_SQL)
