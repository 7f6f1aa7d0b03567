"""Parsing of RFC 2822 and ISO 8601 date strings."""
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Tuple

import structlog
from dateutil import parser as date_parser

from business_logic.instants import to_instant

logger = structlog.get_logger(__name__)

# "GMT+01", "UTC-0530", "UT+1:30". The offset is how far the zone is ahead of GMT.
GMT_OFFSET_PATTERN = re.compile(
    r'\b(?:GMT|UTC|UT)\s*([+-])(\d{1,2})(?::?(\d{2}))?\b', re.IGNORECASE
)

# Fields missing from loose strings are taken from here
FALLBACK_DEFAULT = datetime(1970, 1, 1)

# A trailing zone word the strict grammar does not know, or -0000, means UTC
UNKNOWN_ZONE_PATTERN = re.compile(r"\s(?:[A-Za-z]+|-0000)$")


class DateParser:
    """Parse textual dates into UTC instants.

    Every parse method returns None instead of raising when the input
    cannot be understood. Use is_valid_instant() to test results.
    """

    @staticmethod
    def parse_rfc2822(value: str) -> Optional[datetime]:
        """
        Parse an RFC 2822 date string.

        Supports:
        - Full form: Tue, 26 Jan 2016 13:48:02 GMT
        - Without weekday or seconds: 26 Jan 2016 13:48 +0000
        - Named zones: GMT, UT, EST, EDT, CST, CDT, MST, MDT, PST, PDT
        - Offsets glued to GMT/UTC: Sun, 17 May 1998 03:00:00 GMT+01
        - Loose forms: December 17, 1995 03:24:00

        Strings without a zone are read in config.naive_timezone. Unknown
        zone words and -0000 are read as UTC.

        Args:
            value: Date string to parse

        Returns:
            UTC datetime, or None if parse fails
        """
        if not isinstance(value, str) or not value.strip():
            logger.debug("date_parse_failed", format="rfc2822", value=value)
            return None

        text = GMT_OFFSET_PATTERN.sub(_numeric_offset, value.strip())

        # Strict RFC 2822 grammar first, it knows the obsolete US zone names
        try:
            parsed = parsedate_to_datetime(text)
            if parsed.tzinfo is None and UNKNOWN_ZONE_PATTERN.search(text):
                parsed = parsed.replace(tzinfo=timezone.utc)
            return to_instant(parsed)
        except (TypeError, ValueError, OverflowError):
            pass

        try:
            return to_instant(date_parser.parse(text, default=FALLBACK_DEFAULT))
        except (ValueError, OverflowError):
            logger.debug("date_parse_failed", format="rfc2822", value=value)
            return None

    @staticmethod
    def parse_iso8601(value: str) -> Optional[datetime]:
        """
        Parse an ISO 8601 date string.

        Supports:
        - Offsets: 2016-01-19T16:07:37+00:00
        - Zulu suffix: 2016-01-19T08:07:37Z
        - Fractional seconds: 2016-01-19T08:07:37.250Z
        - Dates only: 2016-01-19 (midnight)

        Strings without a zone are read in config.naive_timezone.

        Args:
            value: Date string to parse

        Returns:
            UTC datetime, or None if parse fails
        """
        if not isinstance(value, str) or not value.strip():
            logger.debug("date_parse_failed", format="iso8601", value=value)
            return None

        try:
            return to_instant(date_parser.isoparse(value.strip()))
        except (ValueError, OverflowError):
            logger.debug("date_parse_failed", format="iso8601", value=value)
            return None

    @staticmethod
    def detect(value: str) -> Optional[Tuple[datetime, str]]:
        """
        Parse a string in whichever supported format it uses.

        ISO 8601 is tried before RFC 2822.

        Returns:
            (instant, format name) tuple, or None if neither format matches
        """
        instant = DateParser.parse_iso8601(value)
        if instant is not None:
            return instant, "iso8601"
        instant = DateParser.parse_rfc2822(value)
        if instant is not None:
            return instant, "rfc2822"
        return None


def _numeric_offset(match: re.Match) -> str:
    sign, hours, minutes = match.groups()
    return f"{sign}{int(hours):02d}{int(minutes or 0):02d}"
