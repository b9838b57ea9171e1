"""Helper modules for the approximator."""

from .comparison_context import ComparisonContext
from .filter_steps import apply_filter, consume

__all__ = [
    "ComparisonContext",
    "apply_filter",
    "consume",
]
