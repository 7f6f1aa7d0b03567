"""Standalone date and time helpers.

Parsers return None for text they cannot read; check results with
is_valid_instant(). The other helpers accept datetimes, dates or epoch
milliseconds and return a placeholder (False, nan or "--:--:--.---")
when given something that is not a valid instant.
"""
from datetime import datetime
from typing import Optional

from business_logic.calendar_rules import is_leap_year
from business_logic.clock import angle_between_clock_hands
from business_logic.date_parser import DateParser
from business_logic.instants import is_valid_instant, to_iso8601
from business_logic.time_span import time_span_to_string
from errors import InvalidRangeError


def parse_date_from_rfc2822(value: str) -> Optional[datetime]:
    """Parse 'Tue, 26 Jan 2016 13:48:02 GMT' style dates into UTC."""
    return DateParser.parse_rfc2822(value)


def parse_date_from_iso8601(value: str) -> Optional[datetime]:
    """Parse '2016-01-19T08:07:37Z' style dates into UTC."""
    return DateParser.parse_iso8601(value)


__all__ = [
    "InvalidRangeError",
    "angle_between_clock_hands",
    "is_leap_year",
    "is_valid_instant",
    "parse_date_from_iso8601",
    "parse_date_from_rfc2822",
    "time_span_to_string",
    "to_iso8601",
]
