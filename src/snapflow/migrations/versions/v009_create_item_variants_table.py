"""Item variants: per-style model number, price and picture."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE item_variants (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    item_id INTEGER NOT NULL REFERENCES items(id) ON DELETE CASCADE,
    style_name TEXT NOT NULL,
    model_number TEXT,
    price REAL NOT NULL,
    image_path TEXT,
    sort_order INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_item_variants_item ON item_variants(item_id);
"""

MIGRATION = MigrationDefinition(name="009_create_item_variants_table", body=MIGRATION_SQL)
