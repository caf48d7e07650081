"""Placements reference a variant and carry the chosen add-ons."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
ALTER TABLE placements ADD COLUMN item_variant_id INTEGER REFERENCES item_variants(id);
ALTER TABLE placements ADD COLUMN selected_addons TEXT;
CREATE INDEX idx_placements_variant ON placements(item_variant_id);
"""

MIGRATION = MigrationDefinition(name="012_update_placements_for_variants", body=MIGRATION_SQL)
