"""Timestamp helpers used by the approximation engine."""

from .timezone import (
    absolute_duration,
    ensure_timezone_aware,
    get_current_local,
    localize,
    signed_difference,
    to_utc,
    validate_timezone,
)

__all__ = [
    "absolute_duration",
    "ensure_timezone_aware",
    "get_current_local",
    "localize",
    "signed_difference",
    "to_utc",
    "validate_timezone",
]
