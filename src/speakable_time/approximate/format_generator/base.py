"""Format generator interface.

A format generator consumes :class:`ApproximateState` values and produces a
template string containing ``%{word}`` placeholders for the translator. It is
either unparsed (collecting states) or parsed, in which case the rendered
template is memoised so repeated formatting does not recalculate it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from ..states import ApproximateState, InPast, Value


class FormatGenerator(ABC):
    """Base class for renderers; subclasses implement :meth:`render`."""

    def __init__(self) -> None:
        self._formats: List[ApproximateState] = []
        self._parsed = False
        self._template: Optional[str] = None

    def is_parsed(self) -> bool:
        return self._parsed

    def mark_parsed(self) -> None:
        self._parsed = True

    def accepts(self, state: ApproximateState) -> bool:
        """Only durations and the past/future flag are rendered by default."""
        return isinstance(state, (Value, InPast))

    def add(self, states: Iterable[ApproximateState]) -> None:
        """Collect the states this generator renders, preserving their order."""
        self._formats.extend(state for state in states if self.accepts(state))
        self._template = None

    def format(self) -> str:
        if not self.is_parsed():
            return self.render(self._formats)
        if self._template is None:
            self._template = self.render(self._formats)
        return self._template

    @abstractmethod
    def render(self, formats: Sequence[ApproximateState]) -> str:
        """Build the template string from the collected states."""


class EmptyFormatGenerator(FormatGenerator):
    """Used for inspecting states mostly; always parsed, always renders ``""``."""

    def is_parsed(self) -> bool:
        return True

    def add(self, states: Iterable[ApproximateState]) -> None:
        return None

    def render(self, formats: Sequence[ApproximateState]) -> str:
        return ""


__all__ = ["EmptyFormatGenerator", "FormatGenerator"]
