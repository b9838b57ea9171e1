"""Compute relative durations from a combination of rules and generate a template."""

from .approximator import Approximator, StateFormatter
from .filters import ApproximateFilter, FilterKind, InvalidFilterError
from .format_generator import (
    CoarseRoundFormat,
    EmptyFormatGenerator,
    FancyDurationFormat,
    FormatGenerator,
)
from .states import (
    ApproximateState,
    ApproximateTime,
    DayName,
    HourShorthand,
    InPast,
    MonthName,
    StateCollection,
    Value,
    WithDate,
    WithTime,
)

__all__ = [
    "ApproximateFilter",
    "ApproximateState",
    "ApproximateTime",
    "Approximator",
    "CoarseRoundFormat",
    "DayName",
    "EmptyFormatGenerator",
    "FancyDurationFormat",
    "FilterKind",
    "FormatGenerator",
    "HourShorthand",
    "InPast",
    "InvalidFilterError",
    "MonthName",
    "StateCollection",
    "StateFormatter",
    "Value",
    "WithDate",
    "WithTime",
]
