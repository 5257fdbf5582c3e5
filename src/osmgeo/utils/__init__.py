"""Utility functions for osmgeo.

This module provides logging setup and run statistics.
"""

from osmgeo.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
]
