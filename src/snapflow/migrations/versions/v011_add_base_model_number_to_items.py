from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
ALTER TABLE items ADD COLUMN base_model_number TEXT;
CREATE INDEX idx_items_base_model ON items(base_model_number);
"""

MIGRATION = MigrationDefinition(name="011_add_base_model_number_to_items", body=MIGRATION_SQL)
