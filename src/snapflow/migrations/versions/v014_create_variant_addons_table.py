"""Add-ons attach to variants rather than items."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE variant_addons (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    variant_id INTEGER NOT NULL REFERENCES item_variants(id) ON DELETE CASCADE,
    addon_variant_id INTEGER NOT NULL REFERENCES item_variants(id) ON DELETE CASCADE,
    is_optional BOOLEAN NOT NULL DEFAULT true,
    sort_order INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_variant_addons_variant ON variant_addons(variant_id);
CREATE INDEX idx_variant_addons_addon ON variant_addons(addon_variant_id);
"""

MIGRATION = MigrationDefinition(name="014_create_variant_addons_table", body=MIGRATION_SQL)
