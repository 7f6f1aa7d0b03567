"""Time-span parsing and formatting utilities for datetasks."""

import re
from typing import Optional

from models import TimeSpan

INVALID_SPAN_TEXT = "--:--:--.---"

# HH:mm:ss.sss, hours may run past two digits
SPAN_PATTERN = re.compile(r'^(\d{2,}):([0-5]\d):([0-5]\d)\.(\d{3})$')


def format_time_span(milliseconds: int) -> str:
    """
    Format a millisecond count as HH:mm:ss.sss.

    Hours are total hours, padded to two digits but never truncated,
    so 100 hours formats as "100:00:00.000".

    Args:
        milliseconds: Non-negative number of milliseconds

    Returns:
        Formatted span string
    """
    span = TimeSpan.from_milliseconds(milliseconds)
    return (
        f"{span.hours:02d}:{span.minutes:02d}:"
        f"{span.seconds:02d}.{span.milliseconds:03d}"
    )


def parse_time_span(span_str: str) -> Optional[TimeSpan]:
    """
    Parse an HH:mm:ss.sss string back into its fields.

    Args:
        span_str: String produced by format_time_span

    Returns:
        TimeSpan, or None if the string is not in HH:mm:ss.sss form
    """
    match = SPAN_PATTERN.match(span_str.strip())
    if not match:
        return None

    hours, minutes, seconds, milliseconds = (int(part) for part in match.groups())
    return TimeSpan(hours, minutes, seconds, milliseconds)
