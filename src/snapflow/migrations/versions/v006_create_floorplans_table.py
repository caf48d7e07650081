"""Floorplan images attached to a project."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE floorplans (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    project_id INTEGER REFERENCES projects(id),
    name TEXT NOT NULL,
    image_path TEXT NOT NULL,
    sort_order INTEGER DEFAULT 0
);

CREATE INDEX idx_floorplans_project ON floorplans(project_id);
"""

MIGRATION = MigrationDefinition(name="006_create_floorplans_table", body=MIGRATION_SQL)
