"""Tokens produced by the approximation engine.

Each state is an immutable, hashable fact about the compared timestamps. A
:class:`StateCollection` keeps them in the order the filters emitted them;
duplicates are allowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Iterable, Iterator, List, Optional

from ..enums import Month, TimeOfDay, Weekday
from ..time_boundary import TimeBoundary


class ApproximateState:
    """Marker base class for every token the engine can emit."""

    __slots__ = ()


@dataclass(frozen=True)
class Value(ApproximateState):
    """``count`` whole units of ``boundary`` consumed from the duration."""

    boundary: TimeBoundary
    count: int


@dataclass(frozen=True)
class InPast(ApproximateState):
    """True when the original timestamp is earlier than the compared one."""

    past: bool


@dataclass(frozen=True)
class ApproximateTime(ApproximateState):
    time_of_day: TimeOfDay


@dataclass(frozen=True)
class DayName(ApproximateState):
    weekday: Weekday


@dataclass(frozen=True)
class MonthName(ApproximateState):
    month: Month


@dataclass(frozen=True)
class HourShorthand(ApproximateState):
    """``"noon"`` or ``"midnight"``."""

    text: str


@dataclass(frozen=True)
class WithDate(ApproximateState):
    date: date


@dataclass(frozen=True)
class WithTime(ApproximateState):
    time: time


class StateCollection:
    """Insertion-ordered sequence of :class:`ApproximateState` values."""

    def __init__(self, states: Optional[Iterable[ApproximateState]] = None) -> None:
        self._states: List[ApproximateState] = list(states) if states is not None else []

    def push(self, state: ApproximateState) -> None:
        """Add a new state to the collection."""
        self._states.append(state)

    def extend(self, states: Iterable[ApproximateState]) -> None:
        self._states.extend(states)

    def contains(self, state: ApproximateState) -> bool:
        """Does this collection contain the state?"""
        return state in self._states

    def copy(self) -> "StateCollection":
        return StateCollection(self._states)

    def __contains__(self, state: object) -> bool:
        return state in self._states

    def __iter__(self) -> Iterator[ApproximateState]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateCollection):
            return NotImplemented
        return self._states == other._states

    def __repr__(self) -> str:
        return f"StateCollection({self._states!r})"


__all__ = [
    "ApproximateState",
    "ApproximateTime",
    "DayName",
    "HourShorthand",
    "InPast",
    "MonthName",
    "StateCollection",
    "Value",
    "WithDate",
    "WithTime",
]
