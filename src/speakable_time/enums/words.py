"""Closed vocabulary of translatable placeholder words.

Format generators emit these words as ``%{word}`` placeholders and the
translator swaps each one for the literal of the active locale.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

_SUFFIX_PREFIX = "suffix_"
_SUFFIX_DIGITS = range(10)


class UnknownWordError(ValueError):
    """Raised when text does not name a word of the vocabulary."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid word {text!r}")
        self.text = text


class Words(Enum):
    """Every word a template may reference, keyed by its canonical literal."""

    JANUARY = "january"
    FEBRUARY = "february"
    MARCH = "march"
    APRIL = "april"
    MAY = "may"
    JUNE = "june"
    JULY = "july"
    AUGUST = "august"
    SEPTEMBER = "september"
    OCTOBER = "october"
    NOVEMBER = "november"
    DECEMBER = "december"
    SUFFIX_0 = "suffix_0"
    SUFFIX_1 = "suffix_1"
    SUFFIX_2 = "suffix_2"
    SUFFIX_3 = "suffix_3"
    SUFFIX_4 = "suffix_4"
    SUFFIX_5 = "suffix_5"
    SUFFIX_6 = "suffix_6"
    SUFFIX_7 = "suffix_7"
    SUFFIX_8 = "suffix_8"
    SUFFIX_9 = "suffix_9"
    NOON = "noon"
    MIDNIGHT = "midnight"
    PM = "pm"
    AM = "am"
    A = "a"
    IN = "in"
    AN = "an"
    AND = "and"
    FROM_NOW = "from now"
    AT = "at"
    AGO = "ago"
    LAST = "last"
    YEAR = "year"
    WEEK = "week"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    YEARS = "years"
    WEEKS = "weeks"
    MONTHS = "months"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    YESTERDAY = "yesterday"
    TODAY = "today"
    TOMORROW = "tomorrow"
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Words":
        """Return the word spelled exactly ``text`` (case-sensitive)."""
        try:
            return cls(text)
        except ValueError as exc:
            raise UnknownWordError(text) from exc

    @classmethod
    def suffix(cls, digit: int) -> "Words":
        """Return the ordinal suffix word for a trailing digit."""
        if digit not in _SUFFIX_DIGITS:
            raise UnknownWordError(f"{_SUFFIX_PREFIX}{digit}")
        return cls(f"{_SUFFIX_PREFIX}{digit}")

    def plural(self) -> "Words":
        """For a unit word return its plural; every other word is returned unchanged."""
        return _PLURALS.get(self, self)


_PLURALS: Dict[Words, Words] = {
    Words.YEAR: Words.YEARS,
    Words.WEEK: Words.WEEKS,
    Words.MONTH: Words.MONTHS,
    Words.DAY: Words.DAYS,
    Words.HOUR: Words.HOURS,
    Words.MINUTE: Words.MINUTES,
    Words.SECOND: Words.SECONDS,
}


__all__ = ["UnknownWordError", "Words"]
