"""
Storage layer for SnapFlow.

Database: aiosqlite-backed session consumed by the migration runner.
"""

from snapflow.storage.database import Database

__all__ = ["Database"]
