"""Tests for the flat date_tasks namespace."""
import math
import pytest
from datetime import datetime, timezone
import date_tasks
from date_tasks import (
    InvalidRangeError,
    angle_between_clock_hands,
    is_leap_year,
    is_valid_instant,
    parse_date_from_iso8601,
    parse_date_from_rfc2822,
    time_span_to_string,
    to_iso8601,
)


class TestPublicNamespace:
    """Test the exported helpers work together."""

    def test_all_names_exported(self):
        for name in date_tasks.__all__:
            assert hasattr(date_tasks, name)

    def test_parse_iso_example(self):
        result = parse_date_from_iso8601("2016-01-19T08:07:37Z")
        assert result == datetime(2016, 1, 19, 8, 7, 37, tzinfo=timezone.utc)

    def test_parse_rfc_example(self):
        result = parse_date_from_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT")
        assert result == datetime(2016, 1, 26, 13, 48, 2, tzinfo=timezone.utc)

    def test_parse_failure_checked_with_predicate(self):
        """Test callers detect parse failures via is_valid_instant."""
        assert is_valid_instant(parse_date_from_rfc2822("invalid")) is False
        assert is_valid_instant(parse_date_from_iso8601("invalid")) is False
        assert is_valid_instant(parse_date_from_iso8601("2016-01-19T08:07:37Z")) is True

    def test_parsed_dates_feed_other_helpers(self):
        start = parse_date_from_iso8601("2000-01-01T10:00:00Z")
        end = parse_date_from_rfc2822("Sat, 01 Jan 2000 15:20:10 GMT")
        assert time_span_to_string(start, end) == "05:20:10.000"
        assert is_leap_year(start) is True
        assert angle_between_clock_hands(parse_date_from_iso8601("2016-04-05T18:00:00Z")) == pytest.approx(math.pi)

    def test_invalid_range_exported(self):
        with pytest.raises(InvalidRangeError):
            time_span_to_string(datetime(2000, 1, 1, 11), datetime(2000, 1, 1, 10))


class TestIsoRoundTrip:
    """Parsing and re-serializing ISO strings keeps the instant."""

    @pytest.mark.parametrize("value", [
        "2016-01-19T08:07:37Z",
        "2016-01-19T16:07:37+00:00",
        "2016-01-19T10:07:37.125+02:00",
        "1999-12-31T23:59:59.999Z",
    ])
    def test_round_trip(self, value):
        parsed = parse_date_from_iso8601(value)
        reparsed = parse_date_from_iso8601(to_iso8601(parsed))
        assert reparsed == parsed
