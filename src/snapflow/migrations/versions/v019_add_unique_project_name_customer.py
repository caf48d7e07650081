"""A customer cannot have two projects with the same name."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE UNIQUE INDEX idx_projects_unique_name_customer ON projects(name, customer_name);
"""

MIGRATION = MigrationDefinition(name="019_add_unique_project_name_customer", body=MIGRATION_SQL)
