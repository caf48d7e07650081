"""Item placements: rectangles on a floorplan."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE placements (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    floorplan_id INTEGER REFERENCES floorplans(id),
    item_id INTEGER REFERENCES items(id),
    x REAL NOT NULL,
    y REAL NOT NULL,
    width REAL NOT NULL,
    height REAL NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_placements_floorplan ON placements(floorplan_id);
CREATE INDEX idx_placements_item ON placements(item_id);
"""

MIGRATION = MigrationDefinition(name="007_create_placements_table", body=MIGRATION_SQL)
