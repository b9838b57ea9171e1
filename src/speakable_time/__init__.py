"""Speakable time.

Speakable times are the informal periods people use, such as "10 years ago"
or "in 2d". An :class:`Approximator` seeded with :class:`ApproximateFilter`
values breaks the duration between two timestamps into states, a
:class:`FormatGenerator` turns them into a template, and a :class:`Translator`
renders the template in a locale.
"""

from .approximate import (
    ApproximateFilter,
    ApproximateState,
    Approximator,
    CoarseRoundFormat,
    EmptyFormatGenerator,
    FancyDurationFormat,
    FormatGenerator,
    StateCollection,
    StateFormatter,
)
from .config import ConfigurationError
from .convenience import build_approximator, from_now, time_diff
from .enums import Month, TimeOfDay, UnknownWordError, Weekday, Words
from .settings import SpeakableTimeConfig
from .time_boundary import TimeBoundary
from .translator import TemplateFormatError, TranslationMap, Translator, default_translator

__all__ = [
    "ApproximateFilter",
    "ApproximateState",
    "Approximator",
    "CoarseRoundFormat",
    "ConfigurationError",
    "EmptyFormatGenerator",
    "FancyDurationFormat",
    "FormatGenerator",
    "Month",
    "SpeakableTimeConfig",
    "StateCollection",
    "StateFormatter",
    "TemplateFormatError",
    "TimeBoundary",
    "TimeOfDay",
    "TranslationMap",
    "Translator",
    "UnknownWordError",
    "Weekday",
    "Words",
    "build_approximator",
    "default_translator",
    "from_now",
    "time_diff",
]
