"""Read-only facts about the two timestamps being compared."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ...time_helpers import signed_difference


@dataclass(frozen=True)
class ComparisonContext:
    """The original timestamp, the compared timestamp and their signed difference.

    ``signed`` is ``compared - original`` and never changes while filters run,
    unlike the remaining duration that rounding filters consume.
    """

    original: datetime
    compared: datetime
    signed: timedelta

    @classmethod
    def between(cls, original: datetime, compared: datetime) -> "ComparisonContext":
        return cls(original=original, compared=compared, signed=signed_difference(original, compared))

    @property
    def absolute(self) -> timedelta:
        return abs(self.signed)

    @property
    def original_in_past(self) -> bool:
        return self.signed > timedelta(0)
