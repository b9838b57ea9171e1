"""Pure filter steps.

Every step takes the remaining duration and the comparison context and returns
the new remaining duration plus the states it emitted. The approximator folds
these steps left to right over its filter list.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ...enums import Month, TimeOfDay, Weekday
from ...time_boundary import TimeBoundary
from ..filters import ApproximateFilter, FilterKind
from ..states import (
    ApproximateState,
    ApproximateTime,
    DayName,
    HourShorthand,
    InPast,
    MonthName,
    Value,
)
from .comparison_context import ComparisonContext

StepResult = Tuple[timedelta, Tuple[ApproximateState, ...]]
FilterStep = Callable[[ApproximateFilter, timedelta, ComparisonContext], StepResult]

_MIDNIGHT_HOUR = 0
_NOON_HOUR = 12


def consume(remaining: timedelta, boundary: TimeBoundary, upper: Optional[int] = None) -> Tuple[timedelta, Optional[Value]]:
    """
    Take whole ``boundary`` units out of ``remaining``.

    Args:
        remaining: Duration still available to later filters
        boundary: Unit to divide by
        upper: Optional largest count that may be taken

    Returns:
        Tuple of (new remaining duration, emitted value or None). When nothing is
        emitted the remaining duration is returned untouched.
    """
    count = boundary.count_in(remaining)
    if count <= 0:
        return remaining, None
    if upper is not None and count > upper:
        return remaining, None
    return remaining - count * boundary.length, Value(boundary, count)


def _scan_top(remaining: timedelta, wanted: int, candidates: Iterable[TimeBoundary]) -> StepResult:
    emitted: List[ApproximateState] = []
    for boundary in candidates:
        if len(emitted) >= wanted:
            break
        remaining, value = consume(remaining, boundary)
        if value is not None:
            emitted.append(value)
    return remaining, tuple(emitted)


def _top_rounds(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    return _scan_top(remaining, item.count, TimeBoundary.all())


def _top_rounds_max_relative(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    cap = item.boundary
    return _scan_top(remaining, item.count, (boundary for boundary in TimeBoundary.all() if boundary <= cap))


def _round(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    remaining, value = consume(remaining, item.boundary)
    return remaining, _single(value)


def _round_with_bound(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    remaining, value = consume(remaining, item.boundary, upper=item.count)
    return remaining, _single(value)


def _relative(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    # remaining is absolute and may already be reduced; use the untouched signed difference
    return remaining, (InPast(context.original_in_past),)


def _approximate_time(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    return remaining, (ApproximateTime(TimeOfDay.from_hour(context.original.hour)),)


def _hour_shorthand(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    hour = context.original.hour
    if hour == _MIDNIGHT_HOUR:
        return remaining, (HourShorthand("midnight"),)
    if hour == _NOON_HOUR:
        return remaining, (HourShorthand("noon"),)
    return remaining, ()


def _month_name_within_year(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    if remaining < TimeBoundary.YEAR.length:
        return remaining, (MonthName(Month.of(context.original)),)
    return remaining, ()


def _day_name_within_week(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    if remaining < TimeBoundary.WEEK.length:
        return remaining, (DayName(Weekday.of(context.original)),)
    return remaining, ()


def _single(value: Optional[Value]) -> Tuple[ApproximateState, ...]:
    if value is None:
        return ()
    return (value,)


_STEPS: Dict[FilterKind, FilterStep] = {
    FilterKind.TOP_ROUNDS: _top_rounds,
    FilterKind.TOP_ROUNDS_MAX_RELATIVE: _top_rounds_max_relative,
    FilterKind.ROUND: _round,
    FilterKind.ROUND_WITH_BOUND: _round_with_bound,
    FilterKind.RELATIVE: _relative,
    FilterKind.APPROXIMATE_TIME: _approximate_time,
    FilterKind.HOUR_SHORTHAND: _hour_shorthand,
    FilterKind.MONTH_NAME_WITHIN_YEAR: _month_name_within_year,
    FilterKind.DAY_NAME_WITHIN_WEEK: _day_name_within_week,
}


def apply_filter(item: ApproximateFilter, remaining: timedelta, context: ComparisonContext) -> StepResult:
    """Run one filter against the remaining duration."""
    return _STEPS[item.kind](item, remaining, context)


__all__ = ["FilterStep", "StepResult", "apply_filter", "consume"]
