"""Approximation engine.

The :class:`Approximator` accepts a list of :class:`ApproximateFilter` and a
:class:`FormatGenerator`. Each call runs the filters in order against the
duration between two timestamps, producing a :class:`StateCollection` that a
fresh copy of the generator turns into a template. The template still has to
go through a :class:`~speakable_time.translator.Translator` to become text.
"""

from __future__ import annotations

import copy
import logging
from datetime import datetime
from typing import Generic, Sequence, Tuple, TypeVar

from ..time_helpers import ensure_timezone_aware, get_current_local
from .approximator_helpers import ComparisonContext, apply_filter
from .filters import ApproximateFilter
from .format_generator import FormatGenerator
from .states import ApproximateState, StateCollection, WithDate, WithTime

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=FormatGenerator)


class StateFormatter(Generic[G]):
    """Drives a format generator against the states of one comparison."""

    def __init__(self, states: StateCollection, generator: G) -> None:
        self._states = states
        self._generator = generator

    def contains(self, state: ApproximateState) -> bool:
        """Does the underlying collection contain the state?"""
        return self._states.contains(state)

    def states(self) -> StateCollection:
        """Return a copy of the collection held by this formatter."""
        return self._states.copy()

    @property
    def generator(self) -> G:
        return self._generator

    def parse(self) -> None:
        """Hand the states to the generator and mark it parsed."""
        self._generator.add(self._states.copy())
        self._generator.mark_parsed()

    def format(self) -> str:
        """Parse on first use, then return the generator's template."""
        if not self._generator.is_parsed():
            self.parse()
        return self._generator.format()

    def format_parsed(self) -> str:
        """Format without mutating this formatter; parses a throwaway copy when needed."""
        if self._generator.is_parsed():
            return self._generator.format()
        return copy.deepcopy(self).format()

    def __str__(self) -> str:
        return self.format_parsed()

    def __repr__(self) -> str:
        return f"StateFormatter({self._states!r}, {type(self._generator).__name__})"


class Approximator(Generic[G]):
    """Immutable pairing of a filter list with a format generator."""

    def __init__(self, filters: Sequence[ApproximateFilter], generator: G) -> None:
        self._filters: Tuple[ApproximateFilter, ...] = tuple(filters)
        self._generator = generator

    @property
    def filters(self) -> Tuple[ApproximateFilter, ...]:
        return self._filters

    def from_now(self, original: datetime) -> StateFormatter[G]:
        """Compare ``original`` against the current local time."""
        return self.difference(original, get_current_local())

    def difference(self, original: datetime, compared: datetime) -> StateFormatter[G]:
        """
        Compute the states describing how ``original`` relates to ``compared``.

        Args:
            original: Timestamp being described; calendar labels come from it
            compared: Reference timestamp

        Returns:
            StateFormatter bound to the resulting states and an unparsed generator
        """
        original = ensure_timezone_aware(original)
        compared = ensure_timezone_aware(compared)
        context = ComparisonContext.between(original, compared)

        states = StateCollection()
        states.push(WithDate(original.date()))
        states.push(WithTime(original.time()))

        remaining = context.absolute
        for item in self._filters:
            remaining, emitted = apply_filter(item, remaining, context)
            states.extend(emitted)
            logger.debug("Filter %s emitted %d state(s); %s remaining", item.kind.value, len(emitted), remaining)

        return StateFormatter(states, copy.deepcopy(self._generator))


__all__ = ["Approximator", "StateFormatter"]
