"""
Centralized DateTime Utilities
==============================

All device timestamps are handled as timezone-aware UTC datetimes.

Functions:
- utc_now(): current UTC time, timezone-aware
- ensure_utc(): normalize naive/aware datetimes to UTC
- is_in_future(): compare a timestamp against the current time
- to_iso(): ISO 8601 string with a 'Z' suffix
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def is_in_future(dt: datetime, reference: Optional[datetime] = None) -> bool:
    """True when dt is strictly after reference (defaults to now)"""
    reference = ensure_utc(reference) if reference is not None else utc_now()
    return ensure_utc(dt) > reference


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in UTC.

    Args:
        dt: datetime object (timezone-aware or naive, naive is treated as UTC)

    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00Z"), or None if dt is None
    """
    if dt is None:
        return None
    return ensure_utc(dt).replace(microsecond=0).isoformat().replace("+00:00", "Z")
