"""Tests for calendar label enums."""

from datetime import datetime

import pytest

from speakable_time.enums import Month, TimeOfDay, Weekday, Words


class TestMonth:
    def test_of_datetime(self):
        assert Month.of(datetime(2024, 4, 3)) is Month.APRIL

    def test_word_conversion(self):
        assert Month.DECEMBER.to_word() is Words.DECEMBER
        assert Month.from_word(Words.MAY) is Month.MAY
        assert Month.from_word(Words.MONDAY) is None

    def test_str(self):
        assert str(Month.SEPTEMBER) == "september"


class TestWeekday:
    @pytest.mark.parametrize(
        "dt,weekday",
        [
            (datetime(2024, 1, 3), Weekday.WEDNESDAY),
            (datetime(2024, 1, 7), Weekday.SUNDAY),
            (datetime(2024, 1, 8), Weekday.MONDAY),
        ],
    )
    def test_of_datetime(self, dt, weekday):
        assert Weekday.of(dt) is weekday

    def test_sunday_listed_first(self):
        assert list(Weekday)[0] is Weekday.SUNDAY

    def test_word_conversion(self):
        assert Weekday.FRIDAY.to_word() is Words.FRIDAY
        assert Weekday.from_word(Words.TUESDAY) is Weekday.TUESDAY
        assert Weekday.from_word(Words.JUNE) is None


class TestTimeOfDay:
    @pytest.mark.parametrize(
        "hour,expected",
        [
            (0, TimeOfDay.NIGHT),
            (5, TimeOfDay.NIGHT),
            (6, TimeOfDay.MORNING),
            (11, TimeOfDay.MORNING),
            (12, TimeOfDay.AFTERNOON),
            (17, TimeOfDay.AFTERNOON),
            (18, TimeOfDay.EVENING),
            (23, TimeOfDay.EVENING),
        ],
    )
    def test_from_hour(self, hour, expected):
        assert TimeOfDay.from_hour(hour) is expected
