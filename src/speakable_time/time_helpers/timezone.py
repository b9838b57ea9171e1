from __future__ import annotations

"""Timezone and clock helper functions."""


import logging
from datetime import datetime, timedelta, timezone

import pytz

logger = logging.getLogger(__name__)


def get_current_local() -> datetime:
    """Get the current wall-clock time in the system zone as an aware datetime."""
    return datetime.now().astimezone()


def validate_timezone(tz_name: str) -> bool:
    """Return True when the timezone string is recognized by pytz."""
    try:
        pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return False
    return True


def localize(naive: datetime, tz_name: str) -> datetime:
    """Attach the named zone to a naive wall-clock datetime, honouring DST."""
    if not validate_timezone(tz_name):
        raise ValueError(f"Unknown timezone '{tz_name}'")
    if naive.tzinfo is not None:
        raise ValueError("localize() expects a naive datetime")
    return pytz.timezone(tz_name).localize(naive)


def ensure_timezone_aware(value: object) -> datetime:
    """
    Ensure datetime is timezone-aware, treating naive values as system-local time.

    Args:
        value: Value (typically a string or datetime) to normalize

    Returns:
        Timezone-aware datetime

    Raises:
        TypeError: If value is not str or datetime
    """
    from dateutil import parser as dateutil_parser

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = dateutil_parser.isoparse(value)
    else:
        raise TypeError(f"Unsupported datetime value type: {type(value)!r}")

    if dt.tzinfo is None:
        # astimezone() attaches the system zone to a naive wall-clock value
        return dt.astimezone()
    return dt


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, reading naive values as system-local time."""
    return dt.astimezone(timezone.utc)


def signed_difference(original: datetime, compared: datetime) -> timedelta:
    """Return ``compared - original`` measured between absolute instants."""
    return to_utc(compared) - to_utc(original)


def absolute_duration(first: datetime, second: datetime) -> timedelta:
    """Return the unsigned duration between two instants."""
    return abs(signed_difference(first, second))
