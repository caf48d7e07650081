from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
DROP INDEX IF EXISTS idx_item_addons_parent;
DROP INDEX IF EXISTS idx_item_addons_addon;
DROP TABLE IF EXISTS item_addons;
"""

MIGRATION = MigrationDefinition(name="017_drop_item_addons_table", body=MIGRATION_SQL)
