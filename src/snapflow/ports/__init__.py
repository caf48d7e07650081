"""Port interfaces for SnapFlow."""

from snapflow.ports.db_session import DbSessionPort

__all__ = ["DbSessionPort"]
