"""Format generators convert approximate states into translator templates."""

from .base import EmptyFormatGenerator, FormatGenerator
from .formats import CoarseRoundFormat, FancyDurationFormat

__all__ = [
    "CoarseRoundFormat",
    "EmptyFormatGenerator",
    "FancyDurationFormat",
    "FormatGenerator",
]
