"""Initial users table."""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
CREATE TABLE users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    email TEXT UNIQUE NOT NULL,
    password_hash TEXT NOT NULL,
    role TEXT CHECK(role IN ('admin', 'user')) NOT NULL DEFAULT 'user',
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX idx_users_email ON users(email);
"""

MIGRATION = MigrationDefinition(name="001_create_users_table", body=MIGRATION_SQL)
