"""Data models for date and time-span values."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


@dataclass(frozen=True)
class TimeSpan:
    """Elapsed time split into whole hours and remainders.

    Hours are not capped at 24; a span of three days has 72 hours.
    """
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    @classmethod
    def from_milliseconds(cls, total: int) -> 'TimeSpan':
        """Decompose a non-negative millisecond count."""
        hours, rest = divmod(total, MS_PER_HOUR)
        minutes, rest = divmod(rest, MS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, MS_PER_SECOND)
        return cls(hours, minutes, seconds, milliseconds)

    @property
    def total_milliseconds(self) -> int:
        return (
            self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )


@dataclass
class DateReport:
    """Everything the inspector derives from one date string."""
    source: str
    instant: datetime
    detected_format: str  # "iso8601" or "rfc2822"
    leap_year: bool
    clock_angle: float


@dataclass
class SpanReport:
    """Two parsed dates and the formatted span between them.

    span_text is None when the end precedes the start.
    """
    start: DateReport
    end: DateReport
    span_text: Optional[str]
