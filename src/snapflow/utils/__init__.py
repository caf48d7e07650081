"""SnapFlow utility modules."""

from snapflow.utils.logging import configure_logging

__all__ = ["configure_logging"]
