"""Customers (folded into projects by 018)."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE customers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT,
    phone TEXT,
    address TEXT,
    created_by INTEGER REFERENCES users(id),
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_customers_name ON customers(name);
"""

MIGRATION = MigrationDefinition(name="004_create_customers_table", body=MIGRATION_SQL)
