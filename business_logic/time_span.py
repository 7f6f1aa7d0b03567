"""Elapsed time between two instants."""
from datetime import timedelta
from typing import Optional

import structlog

from business_logic.instants import InstantLike, to_instant
from errors import InvalidRangeError
from utils.time_utils import INVALID_SPAN_TEXT, format_time_span

logger = structlog.get_logger(__name__)


def elapsed_milliseconds(start: InstantLike, end: InstantLike) -> Optional[int]:
    """
    Milliseconds from start to end, counting whole calendar days.

    Returns:
        Signed millisecond difference, or None if either instant is invalid
    """
    start_instant = to_instant(start)
    end_instant = to_instant(end)
    if start_instant is None or end_instant is None:
        return None
    return (end_instant - start_instant) // timedelta(milliseconds=1)


def time_span_to_string(start: InstantLike, end: InstantLike) -> str:
    """
    Format the time between two instants as HH:mm:ss.sss.

    Examples:
        10:00:00 -> 11:00:00      "01:00:00.000"
        10:00:00 -> 15:20:10.453  "05:20:10.453"

    Args:
        start: Beginning of the span
        end: End of the span, not earlier than start

    Returns:
        Formatted span, or "--:--:--.---" if either instant is invalid

    Raises:
        InvalidRangeError: If end is earlier than start
    """
    elapsed = elapsed_milliseconds(start, end)
    if elapsed is None:
        logger.debug("time_span_invalid_instant", start=start, end=end)
        return INVALID_SPAN_TEXT
    if elapsed < 0:
        raise InvalidRangeError(
            "Time span ends before it starts",
            f"start={start!r} end={end!r} elapsed_ms={elapsed}",
        )
    return format_time_span(elapsed)
