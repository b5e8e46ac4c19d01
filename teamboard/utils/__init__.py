"""Utility helpers for reusable functionality."""

from .timestamps import (
    from_storage,
    get_app_timezone,
    localize,
    storage_now,
    to_storage,
    utc_now,
)

__all__ = [
    "from_storage",
    "get_app_timezone",
    "localize",
    "storage_now",
    "to_storage",
    "utc_now",
]
