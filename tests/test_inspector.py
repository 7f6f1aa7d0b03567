"""Tests for DateInspector."""
import math
import pytest
from datetime import datetime, timezone
from business_logic.inspector import DateInspector
from models import DateReport, SpanReport


class TestInspect:
    """Test single date inspection."""

    def test_inspect_iso(self):
        report = DateInspector.inspect("2016-01-19T08:07:37Z")
        assert isinstance(report, DateReport)
        assert report.source == "2016-01-19T08:07:37Z"
        assert report.detected_format == "iso8601"
        assert report.instant == datetime(2016, 1, 19, 8, 7, 37, tzinfo=timezone.utc)
        assert report.leap_year is True
        # 08:07 puts the hands 158.5 degrees apart
        assert report.clock_angle == pytest.approx(math.radians(158.5))

    def test_inspect_rfc(self):
        report = DateInspector.inspect("  Tue, 26 Jan 2016 13:48:02 GMT ")
        assert report.source == "Tue, 26 Jan 2016 13:48:02 GMT"
        assert report.detected_format == "rfc2822"

    def test_inspect_non_leap_year(self):
        report = DateInspector.inspect("1900-06-01T00:00:00Z")
        assert report.leap_year is False

    def test_inspect_invalid(self):
        assert DateInspector.inspect("invalid") is None


class TestInspectSpan:
    """Test start .. end inspection."""

    def test_inspect_span(self):
        report = DateInspector.inspect_span("2000-01-01T10:00:00 .. 2000-01-01T15:20:10.453")
        assert isinstance(report, SpanReport)
        assert report.span_text == "05:20:10.453"
        assert report.start.instant == datetime(2000, 1, 1, 10, tzinfo=timezone.utc)

    def test_inspect_span_mixed_formats(self):
        report = DateInspector.inspect_span("2000-01-01T10:00:00Z..Sat, 01 Jan 2000 11:00:00 GMT")
        assert report.span_text == "01:00:00.000"

    def test_inspect_span_reversed(self):
        """Test reversed ranges are reported without a span."""
        report = DateInspector.inspect_span("2000-01-01T11:00:00Z .. 2000-01-01T10:00:00Z")
        assert report is not None
        assert report.span_text is None

    def test_inspect_span_missing_separator(self):
        assert DateInspector.inspect_span("2000-01-01T10:00:00Z") is None

    def test_inspect_span_bad_half(self):
        assert DateInspector.inspect_span("2000-01-01T10:00:00Z .. invalid") is None

    def test_is_span_input(self):
        assert DateInspector.is_span_input("a .. b") is True
        assert DateInspector.is_span_input("2016-01-19T08:07:37.250Z") is False
