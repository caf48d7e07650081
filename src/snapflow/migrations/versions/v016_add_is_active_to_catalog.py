"""Soft-deactivation flag for categories, items and variants."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
ALTER TABLE categories ADD COLUMN is_active BOOLEAN DEFAULT true;
ALTER TABLE items ADD COLUMN is_active BOOLEAN DEFAULT true;
ALTER TABLE item_variants ADD COLUMN is_active BOOLEAN DEFAULT true;

CREATE INDEX idx_categories_is_active ON categories(is_active);
CREATE INDEX idx_items_is_active ON items(is_active);
CREATE INDEX idx_item_variants_is_active ON item_variants(is_active);
"""

MIGRATION = MigrationDefinition(name="016_add_is_active_to_catalog", body=MIGRATION_SQL)
