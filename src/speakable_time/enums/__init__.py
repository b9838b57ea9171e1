"""Enums shared across the approximation engine and the translator."""

from .calendar import Month, TimeOfDay, Weekday
from .words import UnknownWordError, Words

__all__ = [
    "Month",
    "TimeOfDay",
    "UnknownWordError",
    "Weekday",
    "Words",
]
