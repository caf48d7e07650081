"""Placements gain a BOM entry reference; backfilled by 022."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
ALTER TABLE placements ADD COLUMN bom_entry_id INTEGER REFERENCES floorplan_bom_entries(id);
CREATE INDEX idx_placements_bom ON placements(bom_entry_id);
"""

MIGRATION = MigrationDefinition(name="021_update_placements_for_bom", body=MIGRATION_SQL)
