"""Utility functions for strokeskel.

This module provides logging setup and the diagnostics sink that records
per-run thinning statistics.
"""

from strokeskel.utils.logging import (
    RunStats,
    ThinningLogger,
    configure_logging,
)

__all__ = [
    "RunStats",
    "ThinningLogger",
    "configure_logging",
]
