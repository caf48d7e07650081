"""Per-item add-on slots (superseded by variant_addons, dropped by 017)."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE item_addons (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    parent_item_id INTEGER NOT NULL REFERENCES items(id) ON DELETE CASCADE,
    addon_item_id INTEGER NOT NULL REFERENCES items(id) ON DELETE CASCADE,
    slot_number INTEGER NOT NULL CHECK(slot_number BETWEEN 1 AND 4),
    is_required BOOLEAN NOT NULL DEFAULT false,
    sort_order INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_item_addons_parent ON item_addons(parent_item_id);
CREATE INDEX idx_item_addons_addon ON item_addons(addon_item_id);
"""

MIGRATION = MigrationDefinition(name="010_create_item_addons_table", body=MIGRATION_SQL)
