from __future__ import annotations

"""Calendar labels derived from a timestamp."""

from datetime import datetime
from enum import Enum
from typing import Optional

from .words import Words

_NIGHT_END_HOUR = 6
_MORNING_END_HOUR = 12
_AFTERNOON_END_HOUR = 18


class Month(Enum):
    """Months in calendar order, valued by their ``datetime.month`` number."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def of(cls, dt: datetime) -> "Month":
        return cls(dt.month)

    def to_word(self) -> Words:
        return Words(str(self))

    @classmethod
    def from_word(cls, word: Words) -> Optional["Month"]:
        """Return the month named by ``word``, or None for any other word."""
        return cls.__members__.get(word.name)


class Weekday(Enum):
    """Days of the week starting with Sunday.

    Values follow ``datetime.weekday()`` (Monday is 0), so ``Weekday(dt.weekday())``
    maps a timestamp directly even though Sunday is listed first.
    """

    SUNDAY = 6
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def of(cls, dt: datetime) -> "Weekday":
        return cls(dt.weekday())

    def to_word(self) -> Words:
        return Words(str(self))

    @classmethod
    def from_word(cls, word: Words) -> Optional["Weekday"]:
        """Return the weekday named by ``word``, or None for any other word."""
        return cls.__members__.get(word.name)


class TimeOfDay(Enum):
    """Approximate part of the day a local hour falls in."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @classmethod
    def from_hour(cls, hour: int) -> "TimeOfDay":
        if hour < _NIGHT_END_HOUR:
            return cls.NIGHT
        if hour < _MORNING_END_HOUR:
            return cls.MORNING
        if hour < _AFTERNOON_END_HOUR:
            return cls.AFTERNOON
        return cls.EVENING


__all__ = ["Month", "TimeOfDay", "Weekday"]
