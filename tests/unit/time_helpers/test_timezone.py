"""
Tests for src/speakable_time/time_helpers/timezone.py

Tests timezone and clock helper functions.
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytz

from speakable_time.time_helpers import (
    absolute_duration,
    ensure_timezone_aware,
    get_current_local,
    localize,
    signed_difference,
    to_utc,
    validate_timezone,
)


class TestGetCurrentLocal:
    def test_returns_aware_time_in_system_zone(self, system_zone):
        system_zone("Asia/Tokyo")

        result = get_current_local()

        assert result.tzinfo is not None
        assert result.utcoffset() == timedelta(hours=9)


class TestValidateTimezone:
    def test_known_and_unknown_zones(self):
        assert validate_timezone("America/New_York") is True
        assert validate_timezone("Invalid/Timezone") is False


class TestLocalize:
    def test_applies_daylight_saving_offset(self):
        winter = localize(datetime(2024, 1, 7, 6), "America/New_York")
        summer = localize(datetime(2024, 4, 3, 6), "America/New_York")

        assert winter.utcoffset() == timedelta(hours=-5)
        assert summer.utcoffset() == timedelta(hours=-4)

    def test_rejects_unknown_zone(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            localize(datetime(2024, 1, 7), "Invalid/Timezone")

    def test_rejects_aware_input(self):
        with pytest.raises(ValueError, match="naive"):
            localize(datetime(2024, 1, 7, tzinfo=timezone.utc), "UTC")


class TestEnsureTimezoneAware:
    def test_reads_naive_datetime_as_system_local(self, system_zone):
        system_zone("Asia/Tokyo")

        result = ensure_timezone_aware(datetime(2024, 1, 1, 12))

        assert result.utcoffset() == timedelta(hours=9)
        assert result == datetime(2024, 1, 1, 3, tzinfo=timezone.utc)
        assert result.hour == 12

    def test_keeps_existing_zone(self):
        eastern = localize(datetime(2024, 1, 1, 12), "US/Eastern")

        assert ensure_timezone_aware(eastern) is eastern

    def test_parses_iso_string(self):
        result = ensure_timezone_aware("2024-01-01T12:00:00Z")

        assert result == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_raises_on_unsupported_type(self):
        with pytest.raises(TypeError, match="Unsupported datetime value type"):
            ensure_timezone_aware(123)


class TestDifferences:
    def test_to_utc_converts_aware(self):
        eastern = pytz.timezone("US/Eastern").localize(datetime(2024, 1, 1, 12))

        assert to_utc(eastern) == datetime(2024, 1, 1, 17, tzinfo=timezone.utc)

    def test_to_utc_reads_naive_as_system_local(self, system_zone):
        system_zone("America/New_York")

        assert to_utc(datetime(2024, 1, 1, 12)) == datetime(2024, 1, 1, 17, tzinfo=timezone.utc)

    def test_signed_difference_crosses_dst(self):
        """Wall clocks six hours apart across the spring change are 86 days 23 hours apart."""
        january = localize(datetime(2024, 1, 7, 6), "America/New_York")
        april = localize(datetime(2024, 4, 3, 6), "America/New_York")

        assert signed_difference(january, april) == timedelta(days=86, hours=23)
        assert signed_difference(april, january) == -timedelta(days=86, hours=23)

    def test_absolute_duration_is_unsigned(self):
        start = datetime(2024, 1, 7, tzinfo=timezone.utc)

        assert absolute_duration(start, start - timedelta(hours=3)) == timedelta(hours=3)
