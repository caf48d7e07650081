"""Projects."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE projects (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    customer_id INTEGER REFERENCES customers(id),
    name TEXT NOT NULL,
    status TEXT CHECK(status IN ('active', 'completed', 'cancelled')) DEFAULT 'active',
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_projects_customer ON projects(customer_id);
"""

MIGRATION = MigrationDefinition(name="005_create_projects_table", body=MIGRATION_SQL)
