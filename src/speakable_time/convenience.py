"""Shortcuts that run an approximator and translate the result in one call."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .approximate import ApproximateFilter, Approximator, FormatGenerator
from .translator import Translator, default_translator


def build_approximator(generator: FormatGenerator, *filters: ApproximateFilter) -> Approximator:
    """Build an :class:`Approximator` from a generator and filters, in order."""
    return Approximator(list(filters), generator)


def time_diff(
    original: datetime,
    compared: datetime,
    approximator: Approximator,
    translator: Optional[Translator] = None,
) -> str:
    """Describe ``original`` relative to ``compared`` as translated text."""
    active = translator if translator is not None else default_translator()
    return active.format(approximator.difference(original, compared).format())


def from_now(original: datetime, approximator: Approximator, translator: Optional[Translator] = None) -> str:
    """Describe ``original`` relative to the current time as translated text."""
    active = translator if translator is not None else default_translator()
    return active.format(approximator.from_now(original).format())


__all__ = ["build_approximator", "from_now", "time_diff"]
