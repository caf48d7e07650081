"""Relax items.price to a nullable column defaulting to 0.

SQLite has no ALTER COLUMN, so the table is rebuilt: create the new
shape, copy rows, drop the old table, rename, recreate indexes.
"""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE items_new (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    category_id INTEGER REFERENCES categories(id),
    name TEXT NOT NULL,
    description TEXT,
    model_number TEXT,
    dimensions TEXT,
    price REAL DEFAULT 0,
    image_path TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    base_model_number TEXT
);

INSERT INTO items_new (
    id, category_id, name, description, model_number, dimensions,
    price, image_path, created_at, base_model_number
)
SELECT
    id, category_id, name, description, model_number, dimensions,
    COALESCE(price, 0), image_path, created_at, base_model_number
FROM items;

DROP TABLE items;

ALTER TABLE items_new RENAME TO items;

CREATE INDEX idx_items_category ON items(category_id);
CREATE INDEX idx_items_base_model ON items(base_model_number);
"""

MIGRATION = MigrationDefinition(name="013_make_items_columns_nullable", body=MIGRATION_SQL)
