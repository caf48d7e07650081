"""Fold customers into projects and drop the customers table.

Customer fields are copied onto each project first, then projects is
rebuilt without the customer_id foreign key.
"""

from snapflow.models.migration import MigrationDefinition

MIGRATION_SQL = """
ALTER TABLE projects ADD COLUMN customer_name TEXT NOT NULL DEFAULT 'Unknown Customer';
ALTER TABLE projects ADD COLUMN customer_email TEXT;
ALTER TABLE projects ADD COLUMN customer_phone TEXT;
ALTER TABLE projects ADD COLUMN customer_address TEXT;

UPDATE projects
SET
    customer_name = COALESCE(
        (SELECT c.name FROM customers c WHERE c.id = projects.customer_id),
        'Unknown Customer'
    ),
    customer_email = (
        SELECT c.email FROM customers c WHERE c.id = projects.customer_id
    ),
    customer_phone = (
        SELECT c.phone FROM customers c WHERE c.id = projects.customer_id
    ),
    customer_address = (
        SELECT c.address FROM customers c WHERE c.id = projects.customer_id
    );

CREATE TABLE projects_new (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    status TEXT CHECK(status IN ('active', 'completed', 'cancelled')) DEFAULT 'active',
    customer_name TEXT NOT NULL,
    customer_email TEXT,
    customer_phone TEXT,
    customer_address TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

INSERT INTO projects_new (
    id, name, status, customer_name, customer_email, customer_phone,
    customer_address, created_at
)
SELECT
    id, name, status, customer_name, customer_email, customer_phone,
    customer_address, created_at
FROM projects;

DROP TABLE projects;
ALTER TABLE projects_new RENAME TO projects;

CREATE INDEX idx_projects_status ON projects(status);
CREATE INDEX idx_projects_customer_name ON projects(customer_name);

DROP INDEX IF EXISTS idx_customers_name;
DROP TABLE IF EXISTS customers;
"""

MIGRATION = MigrationDefinition(name="018_remove_customers_table", body=MIGRATION_SQL)
