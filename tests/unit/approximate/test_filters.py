"""Tests for filter descriptors."""

import pytest

from speakable_time.approximate.filters import ApproximateFilter, FilterKind, InvalidFilterError
from speakable_time.time_boundary import TimeBoundary


class TestApproximateFilter:
    def test_factories_record_arguments(self):
        item = ApproximateFilter.top_rounds_max_relative(3, TimeBoundary.HOUR)

        assert item.kind is FilterKind.TOP_ROUNDS_MAX_RELATIVE
        assert item.count == 3
        assert item.boundary is TimeBoundary.HOUR

    def test_filters_compare_by_value(self):
        assert ApproximateFilter.round(TimeBoundary.DAY) == ApproximateFilter.round(TimeBoundary.DAY)
        assert ApproximateFilter.round(TimeBoundary.DAY) != ApproximateFilter.round(TimeBoundary.WEEK)
        assert ApproximateFilter.relative() == ApproximateFilter.relative()

    def test_rejects_negative_count(self):
        with pytest.raises(InvalidFilterError, match="non-negative count"):
            ApproximateFilter.top_rounds(-1)

    def test_rejects_negative_bound(self):
        with pytest.raises(InvalidFilterError, match="upper bound"):
            ApproximateFilter.round_with_bound(TimeBoundary.MONTH, -2)

    @pytest.mark.parametrize(
        "build",
        [
            lambda: ApproximateFilter.top_rounds("2"),
            lambda: ApproximateFilter.top_rounds(True),
            lambda: ApproximateFilter.round_with_bound(TimeBoundary.MONTH, 1.5),
            lambda: ApproximateFilter.top_rounds_max_relative(None, TimeBoundary.DAY),
        ],
    )
    def test_rejects_non_integer_counts(self, build):
        with pytest.raises(InvalidFilterError, match="requires an integer"):
            build()

    def test_rejects_non_boundary(self):
        with pytest.raises(InvalidFilterError, match="requires a TimeBoundary"):
            ApproximateFilter.round("day")

    def test_is_a_value_error(self):
        assert issubclass(InvalidFilterError, ValueError)
