from __future__ import annotations

"""Filter descriptors for the approximator.

Filters help the approximator decide what is relevant to a duration. They are
immutable values built through the factory classmethods below; the order of a
filter list is significant because rounding filters consume the duration that
later filters see.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..time_boundary import TimeBoundary


class FilterKind(Enum):
    TOP_ROUNDS = "top_rounds"
    TOP_ROUNDS_MAX_RELATIVE = "top_rounds_max_relative"
    ROUND_WITH_BOUND = "round_with_bound"
    ROUND = "round"
    DAY_NAME_WITHIN_WEEK = "day_name_within_week"
    MONTH_NAME_WITHIN_YEAR = "month_name_within_year"
    HOUR_SHORTHAND = "hour_shorthand"
    APPROXIMATE_TIME = "approximate_time"
    RELATIVE = "relative"


class InvalidFilterError(ValueError):
    """Raised when a filter is configured with unusable arguments."""

    @classmethod
    def negative(cls, kind: FilterKind, param_name: str, value: int) -> "InvalidFilterError":
        """Create error for a negative count or bound."""
        return cls(f"{kind.value} requires a non-negative {param_name} (got {value!r})")

    @classmethod
    def not_an_integer(cls, kind: FilterKind, param_name: str, value: object) -> "InvalidFilterError":
        """Create error for a count or bound that is not an integer."""
        return cls(f"{kind.value} requires an integer {param_name} (got {value!r})")

    @classmethod
    def not_a_boundary(cls, kind: FilterKind, value: object) -> "InvalidFilterError":
        """Create error for a boundary argument that is not a TimeBoundary."""
        return cls(f"{kind.value} requires a TimeBoundary (got {value!r})")


@dataclass(frozen=True)
class ApproximateFilter:
    kind: FilterKind
    boundary: Optional[TimeBoundary] = None
    count: Optional[int] = None

    @classmethod
    def top_rounds(cls, count: int) -> "ApproximateFilter":
        """The top ``count`` boundaries that round cleanly and are non-zero."""
        _require_non_negative(FilterKind.TOP_ROUNDS, "count", count)
        return cls(FilterKind.TOP_ROUNDS, count=count)

    @classmethod
    def top_rounds_max_relative(cls, count: int, boundary: TimeBoundary) -> "ApproximateFilter":
        """Like :meth:`top_rounds`, ignoring every boundary coarser than ``boundary``."""
        _require_non_negative(FilterKind.TOP_ROUNDS_MAX_RELATIVE, "count", count)
        _require_boundary(FilterKind.TOP_ROUNDS_MAX_RELATIVE, boundary)
        return cls(FilterKind.TOP_ROUNDS_MAX_RELATIVE, boundary=boundary, count=count)

    @classmethod
    def round_with_bound(cls, boundary: TimeBoundary, upper: int) -> "ApproximateFilter":
        """Round to ``boundary`` only while the quotient does not exceed ``upper``."""
        _require_boundary(FilterKind.ROUND_WITH_BOUND, boundary)
        _require_non_negative(FilterKind.ROUND_WITH_BOUND, "upper bound", upper)
        return cls(FilterKind.ROUND_WITH_BOUND, boundary=boundary, count=upper)

    @classmethod
    def round(cls, boundary: TimeBoundary) -> "ApproximateFilter":
        """Consume as many whole ``boundary`` units as the duration holds."""
        _require_boundary(FilterKind.ROUND, boundary)
        return cls(FilterKind.ROUND, boundary=boundary)

    @classmethod
    def day_name_within_week(cls) -> "ApproximateFilter":
        return cls(FilterKind.DAY_NAME_WITHIN_WEEK)

    @classmethod
    def month_name_within_year(cls) -> "ApproximateFilter":
        return cls(FilterKind.MONTH_NAME_WITHIN_YEAR)

    @classmethod
    def hour_shorthand(cls) -> "ApproximateFilter":
        """Noon and midnight for those exact hours."""
        return cls(FilterKind.HOUR_SHORTHAND)

    @classmethod
    def approximate_time(cls) -> "ApproximateFilter":
        """Morning, Afternoon, Evening or Night depending on the hour."""
        return cls(FilterKind.APPROXIMATE_TIME)

    @classmethod
    def relative(cls) -> "ApproximateFilter":
        """Whether the original time precedes the compared time."""
        return cls(FilterKind.RELATIVE)


def _require_non_negative(kind: FilterKind, param_name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFilterError.not_an_integer(kind, param_name, value)
    if value < 0:
        raise InvalidFilterError.negative(kind, param_name, value)


def _require_boundary(kind: FilterKind, value: object) -> None:
    if not isinstance(value, TimeBoundary):
        raise InvalidFilterError.not_a_boundary(kind, value)


__all__ = ["ApproximateFilter", "FilterKind", "InvalidFilterError"]
