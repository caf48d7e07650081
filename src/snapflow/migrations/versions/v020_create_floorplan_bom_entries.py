"""Per-floorplan bill of materials.

Each entry keeps catalog references (used only to refresh from the
catalog) next to frozen name/model/price/picture snapshots. Add-on
entries point at their main entry through parent_bom_entry_id.
"""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE floorplan_bom_entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    floorplan_id INTEGER NOT NULL REFERENCES floorplans(id) ON DELETE CASCADE,
    item_id INTEGER NOT NULL REFERENCES items(id),
    variant_id INTEGER NOT NULL REFERENCES item_variants(id),
    parent_bom_entry_id INTEGER REFERENCES floorplan_bom_entries(id) ON DELETE CASCADE,
    name_snapshot TEXT NOT NULL,
    model_number_snapshot TEXT,
    price_snapshot REAL NOT NULL,
    picture_path TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_bom_floorplan ON floorplan_bom_entries(floorplan_id);
CREATE INDEX idx_bom_parent ON floorplan_bom_entries(parent_bom_entry_id);
CREATE INDEX idx_bom_item ON floorplan_bom_entries(item_id);
CREATE INDEX idx_bom_variant ON floorplan_bom_entries(variant_id);

-- One main entry per variant per floorplan
CREATE UNIQUE INDEX idx_bom_main_unique ON floorplan_bom_entries(floorplan_id, variant_id)
    WHERE parent_bom_entry_id IS NULL;
"""

MIGRATION = MigrationDefinition(name="020_create_floorplan_bom_entries", body=MIGRATION_SQL)
