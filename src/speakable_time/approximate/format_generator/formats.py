"""Shipped format generators."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from ...enums import Words
from ...time_boundary import TimeBoundary
from ..states import ApproximateState, InPast, Value
from .base import FormatGenerator

# Month and minute share "m"; compact output is ambiguous between the two.
_UNIT_LETTERS: Dict[TimeBoundary, str] = {
    TimeBoundary.YEAR: "y",
    TimeBoundary.MONTH: "m",
    TimeBoundary.WEEK: "w",
    TimeBoundary.DAY: "d",
    TimeBoundary.HOUR: "h",
    TimeBoundary.MINUTE: "m",
    TimeBoundary.SECOND: "s",
}


def _placeholder(word: Words) -> str:
    return f"%{{{word}}}"


class FancyDurationFormat(FormatGenerator):
    """Compact durations such as ``2y1h15m``."""

    def render(self, formats: Sequence[ApproximateState]) -> str:
        in_past: Optional[bool] = None
        rendered = ""

        for state in formats:
            if isinstance(state, InPast):
                in_past = state.past
            elif isinstance(state, Value):
                rendered += f"{state.count}{_UNIT_LETTERS[state.boundary]}"

        if in_past is None:
            return rendered
        if in_past:
            return f"{rendered} {_placeholder(Words.AGO)}"
        return f"{_placeholder(Words.IN)} {rendered}"


class CoarseRoundFormat(FormatGenerator):
    """Verbose durations such as ``2 years, 5 months and 3 days ago``."""

    def render(self, formats: Sequence[ApproximateState]) -> str:
        in_past: Optional[bool] = None
        rendered = ""
        pending = ""
        total = len(formats)

        for index, state in enumerate(formats):
            if isinstance(state, InPast):
                in_past = state.past
                continue
            if not isinstance(state, Value):
                continue

            rendered += pending
            word = state.boundary.to_word()
            if state.count > 1:
                word = word.plural()

            # index counts the past/future flag too, so its position shifts the commas
            if total >= 2 and index < total - 2:
                pending = f"{state.count} {_placeholder(word)}, "
            else:
                pending = f"{state.count} {_placeholder(word)} "

        if pending:
            if rendered:
                rendered += f"{_placeholder(Words.AND)} {pending.strip()}"
            else:
                rendered += pending.strip()

        if in_past is None:
            return rendered
        if in_past:
            return f"{rendered} {_placeholder(Words.AGO)}"
        return f"{rendered} {_placeholder(Words.FROM_NOW)}"


__all__ = ["CoarseRoundFormat", "FancyDurationFormat"]
