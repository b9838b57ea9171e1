"""Tests for the format generator lifecycle."""

from typing import Sequence

from speakable_time.approximate import EmptyFormatGenerator, FormatGenerator, InPast, StateCollection, Value
from speakable_time.approximate.states import ApproximateState, DayName
from speakable_time.enums import Weekday
from speakable_time.time_boundary import TimeBoundary


class CountingFormat(FormatGenerator):
    """Renders the number of collected states and counts render calls."""

    def __init__(self) -> None:
        super().__init__()
        self.renders = 0

    def render(self, formats: Sequence[ApproximateState]) -> str:
        self.renders += 1
        return str(len(formats))


class DayNameFormat(FormatGenerator):
    """User-supplied generator that renders calendar labels."""

    def accepts(self, state: ApproximateState) -> bool:
        return isinstance(state, DayName)

    def render(self, formats: Sequence[ApproximateState]) -> str:
        return " ".join(f"%{{{state.weekday.to_word()}}}" for state in formats)


class TestFormatGeneratorLifecycle:
    def test_starts_unparsed(self):
        assert not CountingFormat().is_parsed()

    def test_parsed_template_is_memoised(self):
        generator = CountingFormat()
        generator.add(StateCollection([Value(TimeBoundary.DAY, 1), InPast(True)]))
        generator.mark_parsed()

        assert generator.format() == "2"
        assert generator.format() == "2"
        assert generator.renders == 1

    def test_add_filters_unrendered_states(self):
        generator = CountingFormat()
        generator.add(StateCollection([DayName(Weekday.MONDAY), Value(TimeBoundary.DAY, 1)]))
        generator.mark_parsed()

        assert generator.format() == "1"

    def test_custom_generator_can_use_calendar_labels(self):
        generator = DayNameFormat()
        generator.add(StateCollection([Value(TimeBoundary.DAY, 1), DayName(Weekday.FRIDAY)]))
        generator.mark_parsed()

        assert generator.format() == "%{friday}"


class TestEmptyFormatGenerator:
    def test_always_parsed_and_empty(self):
        generator = EmptyFormatGenerator()
        generator.add(StateCollection([Value(TimeBoundary.DAY, 1)]))

        assert generator.is_parsed()
        assert generator.format() == ""
