"""Move the BOM from floorplans to projects.

floorplan_bom_entries becomes project_bom with a project_id (taken
from the floorplan) and a style_name snapshot backfilled from the
variant. placements is rebuilt to hold only geometry and bom_id.
"""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE project_bom (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    project_id INTEGER NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    floorplan_id INTEGER NOT NULL REFERENCES floorplans(id) ON DELETE CASCADE,
    item_id INTEGER NOT NULL REFERENCES items(id),
    variant_id INTEGER NOT NULL REFERENCES item_variants(id),
    parent_bom_id INTEGER REFERENCES project_bom(id) ON DELETE CASCADE,
    name_snapshot TEXT NOT NULL,
    style_name TEXT,
    model_number_snapshot TEXT,
    price_snapshot REAL NOT NULL,
    picture_path TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

INSERT INTO project_bom (
    id, project_id, floorplan_id, item_id, variant_id, parent_bom_id,
    name_snapshot, style_name, model_number_snapshot, price_snapshot, picture_path,
    created_at, updated_at
)
SELECT
    b.id,
    f.project_id,
    b.floorplan_id,
    b.item_id,
    b.variant_id,
    b.parent_bom_entry_id,
    b.name_snapshot,
    NULL,
    b.model_number_snapshot,
    b.price_snapshot,
    b.picture_path,
    b.created_at,
    b.updated_at
FROM floorplan_bom_entries b
JOIN floorplans f ON b.floorplan_id = f.id;

UPDATE project_bom
SET style_name = (
    SELECT iv.style_name
    FROM item_variants iv
    WHERE iv.id = project_bom.variant_id
)
WHERE style_name IS NULL;

CREATE INDEX idx_project_bom_project ON project_bom(project_id);
CREATE INDEX idx_project_bom_floorplan ON project_bom(floorplan_id);
CREATE INDEX idx_project_bom_parent ON project_bom(parent_bom_id);
CREATE INDEX idx_project_bom_item ON project_bom(item_id);
CREATE INDEX idx_project_bom_variant ON project_bom(variant_id);

CREATE UNIQUE INDEX idx_project_bom_unique ON project_bom(floorplan_id, variant_id)
    WHERE parent_bom_id IS NULL;

CREATE TABLE placements_new (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    bom_id INTEGER REFERENCES project_bom(id) ON DELETE CASCADE,
    x REAL NOT NULL,
    y REAL NOT NULL,
    width REAL NOT NULL,
    height REAL NOT NULL
);

INSERT INTO placements_new (id, bom_id, x, y, width, height)
SELECT id, bom_entry_id, x, y, width, height FROM placements;

DROP TABLE placements;
ALTER TABLE placements_new RENAME TO placements;

CREATE INDEX idx_placements_bom ON placements(bom_id);

DROP TABLE floorplan_bom_entries;
"""

MIGRATION = MigrationDefinition(name="023_rename_bom_add_project", body=MIGRATION_SQL)
