"""American English literals used when no locale is configured."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

from ..enums import Words
from .translator import Translator

ENGLISH_LITERALS: Dict[Words, str] = {
    Words.JANUARY: "January",
    Words.FEBRUARY: "February",
    Words.MARCH: "March",
    Words.APRIL: "April",
    Words.MAY: "May",
    Words.JUNE: "June",
    Words.JULY: "July",
    Words.AUGUST: "August",
    Words.SEPTEMBER: "September",
    Words.OCTOBER: "October",
    Words.NOVEMBER: "November",
    Words.DECEMBER: "December",
    Words.SUFFIX_0: "th",
    Words.SUFFIX_1: "st",
    Words.SUFFIX_2: "nd",
    Words.SUFFIX_3: "rd",
    Words.SUFFIX_4: "th",
    Words.SUFFIX_5: "th",
    Words.SUFFIX_6: "th",
    Words.SUFFIX_7: "th",
    Words.SUFFIX_8: "th",
    Words.SUFFIX_9: "th",
    Words.NOON: "Noon",
    Words.MIDNIGHT: "Midnight",
    Words.PM: "PM",
    Words.AM: "AM",
    Words.A: "a",
    Words.IN: "in",
    Words.AN: "an",
    Words.AT: "at",
    Words.AGO: "ago",
    Words.LAST: "last",
    Words.YEAR: "year",
    Words.WEEK: "week",
    Words.MONTH: "month",
    Words.DAY: "day",
    Words.HOUR: "hour",
    Words.MINUTE: "minute",
    Words.SECOND: "second",
    Words.YEARS: "years",
    Words.WEEKS: "weeks",
    Words.MONTHS: "months",
    Words.DAYS: "days",
    Words.HOURS: "hours",
    Words.MINUTES: "minutes",
    Words.SECONDS: "seconds",
    Words.YESTERDAY: "Yesterday",
    Words.TODAY: "Today",
    Words.TOMORROW: "Tomorrow",
    Words.SUNDAY: "Sunday",
    Words.MONDAY: "Monday",
    Words.TUESDAY: "Tuesday",
    Words.WEDNESDAY: "Wednesday",
    Words.THURSDAY: "Thursday",
    Words.FRIDAY: "Friday",
    Words.SATURDAY: "Saturday",
    Words.AND: "and",
    Words.FROM_NOW: "from now",
}


@lru_cache(maxsize=1)
def default_translator() -> Translator:
    """Return the shared American English translator."""
    return Translator(ENGLISH_LITERALS)


__all__ = ["ENGLISH_LITERALS", "default_translator"]
