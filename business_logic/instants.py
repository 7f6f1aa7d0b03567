"""Coercion helpers shared by the date utilities.

An instant is an aware datetime normalized to UTC. The helpers here accept
the looser values callers tend to pass around (naive datetimes, dates and
epoch milliseconds) and turn anything they cannot interpret into None.
"""
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

from config import config

InstantLike = Union[datetime, date, int, float, None]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_instant(value: InstantLike) -> Optional[datetime]:
    """
    Coerce a value to a UTC-aware datetime.

    Args:
        value: datetime (naive values use config.naive_timezone), date
            (midnight), or milliseconds since the Unix epoch

    Returns:
        UTC datetime, or None if the value is not a valid instant
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=config.naive_tzinfo)
        try:
            return value.astimezone(timezone.utc)
        except OverflowError:
            # Offset pushes the value outside datetime's year range
            return None
    if isinstance(value, date):
        return to_instant(datetime.combine(value, time()))
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        try:
            return from_epoch_milliseconds(value)
        except OverflowError:
            return None
    return None


def is_valid_instant(value: InstantLike) -> bool:
    """Return True if value can be interpreted as an instant."""
    return to_instant(value) is not None


def from_epoch_milliseconds(milliseconds: Union[int, float]) -> datetime:
    """Build a UTC datetime from milliseconds since the Unix epoch."""
    return EPOCH + timedelta(milliseconds=milliseconds)


def to_epoch_milliseconds(value: InstantLike) -> Optional[int]:
    """Milliseconds since the Unix epoch, truncated toward the past."""
    instant = to_instant(value)
    if instant is None:
        return None
    return (instant - EPOCH) // timedelta(milliseconds=1)


def to_iso8601(value: InstantLike) -> Optional[str]:
    """
    Serialize an instant as YYYY-MM-DDTHH:MM:SS.sssZ.

    Returns:
        ISO-8601 string in UTC, or None for an invalid instant
    """
    instant = to_instant(value)
    if instant is None:
        return None
    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
        f".{instant.microsecond // 1000:03d}Z"
    )
