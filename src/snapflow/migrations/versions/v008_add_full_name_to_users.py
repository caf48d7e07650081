from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
ALTER TABLE users ADD COLUMN full_name TEXT;
"""

MIGRATION = MigrationDefinition(name="008_add_full_name_to_users", body=MIGRATION_SQL)
