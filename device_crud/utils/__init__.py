"""Utility modules for the device CRUD application."""

from .datetime_utils import ensure_utc, is_in_future, to_iso, utc_now

__all__ = [
    "ensure_utc",
    "is_in_future",
    "to_iso",
    "utc_now",
]
