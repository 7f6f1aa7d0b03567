"""Free-text date inspection used by the terminal viewer."""
from typing import Optional

from business_logic.calendar_rules import is_leap_year
from business_logic.clock import angle_between_clock_hands
from business_logic.date_parser import DateParser
from business_logic.time_span import time_span_to_string
from errors import InvalidRangeError
from models import DateReport, SpanReport

SPAN_SEPARATOR = ".."


class DateInspector:
    """Turns user input into DateReport / SpanReport objects."""

    @staticmethod
    def inspect(input_str: str) -> Optional[DateReport]:
        """
        Parse a single date and derive its properties.

        Args:
            input_str: ISO 8601 or RFC 2822 date string

        Returns:
            DateReport, or None if the date could not be parsed
        """
        source = input_str.strip()
        detected = DateParser.detect(source)
        if detected is None:
            return None

        instant, detected_format = detected
        return DateReport(
            source=source,
            instant=instant,
            detected_format=detected_format,
            leap_year=is_leap_year(instant),
            clock_angle=angle_between_clock_hands(instant),
        )

    @staticmethod
    def inspect_span(input_str: str) -> Optional[SpanReport]:
        """
        Parse "start .. end" and format the span between the two dates.

        Returns:
            SpanReport, or None if the separator is missing or either date fails to parse
        """
        if SPAN_SEPARATOR not in input_str:
            return None

        start_str, end_str = input_str.split(SPAN_SEPARATOR, 1)
        start = DateInspector.inspect(start_str)
        end = DateInspector.inspect(end_str)
        if start is None or end is None:
            return None

        try:
            span_text = time_span_to_string(start.instant, end.instant)
        except InvalidRangeError:
            span_text = None
        return SpanReport(start=start, end=end, span_text=span_text)

    @staticmethod
    def is_span_input(input_str: str) -> bool:
        return SPAN_SEPARATOR in input_str
