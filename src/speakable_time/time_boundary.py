"""Ordered duration units used to decompose a time difference.

Crossing from a series of seconds to a series of minutes to a series of hours
crosses several time boundaries. Each boundary carries a fixed-length
approximation in seconds; months are 30 days and years 365 days.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from functools import total_ordering
from typing import Dict, Optional, Tuple

from .constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_WEEK,
    SECONDS_PER_YEAR,
)
from .enums import Words
from .time_helpers import absolute_duration

_DAYS_PER_MONTH = 30
_DAYS_PER_YEAR = 365
_SECONDS_PER_MINUTE_WINDOW = 60


@total_ordering
class TimeBoundary(Enum):
    """Units ordered by granularity, finer boundaries compare lower."""

    SECOND = 0
    MINUTE = 1
    HOUR = 2
    DAY = 3
    WEEK = 4
    MONTH = 5
    YEAR = 6

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeBoundary):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def all(cls) -> Tuple["TimeBoundary", ...]:
        """Yield all time boundaries with the most significant (years) first."""
        return _ALL_COARSEST_FIRST

    @classmethod
    def highest(cls, first: datetime, second: datetime) -> Optional["TimeBoundary"]:
        """Return the coarsest boundary the difference between these times can report."""
        for boundary in cls.all():
            if boundary.within(first, second):
                return boundary
        return None

    @property
    def seconds(self) -> int:
        """Fixed approximate length of one unit, in seconds."""
        return _UNIT_SECONDS[self]

    @property
    def length(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def count_in(self, duration: timedelta) -> int:
        """Number of whole units contained in a non-negative duration."""
        return duration // self.length

    def within(self, first: datetime, second: datetime) -> bool:
        """Does the absolute difference of these two times span this boundary?"""
        duration = absolute_duration(first, second)
        seconds = duration // timedelta(seconds=1)
        minutes = TimeBoundary.MINUTE.count_in(duration)
        hours = TimeBoundary.HOUR.count_in(duration)
        days = TimeBoundary.DAY.count_in(duration)

        if self is TimeBoundary.SECOND:
            return seconds < _SECONDS_PER_MINUTE_WINDOW
        if self is TimeBoundary.MINUTE:
            return minutes > 1 and hours == 0
        if self is TimeBoundary.HOUR:
            return hours > 1 and days == 0
        if self is TimeBoundary.DAY:
            return 1 < days < _DAYS_PER_MONTH
        if self is TimeBoundary.WEEK:
            return TimeBoundary.WEEK.count_in(duration) > 1 and days < _DAYS_PER_MONTH
        if self is TimeBoundary.MONTH:
            return _DAYS_PER_MONTH < days < _DAYS_PER_YEAR
        return days > _DAYS_PER_YEAR

    def value_of(self, dt: datetime) -> int:
        """Return the component of ``dt`` at this granularity."""
        if self is TimeBoundary.WEEK:
            return dt.isocalendar()[1]
        return getattr(dt, _COMPONENT_ATTRS[self])

    def to_word(self) -> Words:
        return Words(str(self))

    @classmethod
    def from_word(cls, word: Words) -> Optional["TimeBoundary"]:
        """Return the boundary a singular unit word names, or None."""
        return cls.__members__.get(word.name)


_ALL_COARSEST_FIRST: Tuple[TimeBoundary, ...] = (
    TimeBoundary.YEAR,
    TimeBoundary.MONTH,
    TimeBoundary.WEEK,
    TimeBoundary.DAY,
    TimeBoundary.HOUR,
    TimeBoundary.MINUTE,
    TimeBoundary.SECOND,
)

_UNIT_SECONDS: Dict[TimeBoundary, int] = {
    TimeBoundary.SECOND: 1,
    TimeBoundary.MINUTE: SECONDS_PER_MINUTE,
    TimeBoundary.HOUR: SECONDS_PER_HOUR,
    TimeBoundary.DAY: SECONDS_PER_DAY,
    TimeBoundary.WEEK: SECONDS_PER_WEEK,
    TimeBoundary.MONTH: SECONDS_PER_MONTH,
    TimeBoundary.YEAR: SECONDS_PER_YEAR,
}

_COMPONENT_ATTRS: Dict[TimeBoundary, str] = {
    TimeBoundary.SECOND: "second",
    TimeBoundary.MINUTE: "minute",
    TimeBoundary.HOUR: "hour",
    TimeBoundary.DAY: "day",
    TimeBoundary.MONTH: "month",
    TimeBoundary.YEAR: "year",
}


__all__ = ["TimeBoundary"]
