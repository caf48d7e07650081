"""SnapFlow schema migrations.

Applies the ordered catalog of SnapFlow schema and data
migrations to a SQLite database exactly once each.
"""

__version__ = "0.1.0"
