"""Widget that renders date and span reports."""
from typing import Optional, Union

from textual.widgets import Static

from business_logic.clock import radians_to_degrees
from business_logic.instants import to_epoch_milliseconds, to_iso8601
from models import DateReport, SpanReport

FORMAT_LABELS = {
    "iso8601": "ISO 8601",
    "rfc2822": "RFC 2822",
}


class DateReportWidget(Static):
    """Displays the result of the last inspected input."""

    def __init__(self):
        super().__init__()
        self.report: Optional[Union[DateReport, SpanReport]] = None
        self.error: Optional[str] = None

    def show_report(self, report: Union[DateReport, SpanReport]) -> None:
        self.report = report
        self.error = None
        self.update(self.render_report())

    def show_error(self, source: str) -> None:
        self.report = None
        self.error = source
        self.update(self.render_report())

    def render_report(self) -> str:
        """Build the Rich markup for the current state."""
        if self.error is not None:
            return f"[red]Could not parse:[/red] {self.error}"
        if self.report is None:
            return "[dim]Type a date, or two dates separated by '..'[/dim]"
        if isinstance(self.report, SpanReport):
            return self.format_span(self.report)
        return self.format_date(self.report)

    @staticmethod
    def format_date(report: DateReport) -> str:
        """
        Format a single date report.

        Example output:
            Input        2016-01-19T08:07:37Z
            Format       ISO 8601
            UTC          2016-01-19T08:07:37.000Z
            Epoch ms     1453190857000
            Leap year    yes
            Clock angle  2.3562 rad (135.0°)
        """
        angle = report.clock_angle
        lines = [
            f"[bold]Input[/bold]        {report.source}",
            f"[bold]Format[/bold]       {FORMAT_LABELS.get(report.detected_format, report.detected_format)}",
            f"[bold]UTC[/bold]          {to_iso8601(report.instant)}",
            f"[bold]Epoch ms[/bold]     {to_epoch_milliseconds(report.instant)}",
            f"[bold]Leap year[/bold]    {'yes' if report.leap_year else 'no'}",
            f"[bold]Clock angle[/bold]  {angle:.4f} rad ({radians_to_degrees(angle):.1f}°)",
        ]
        return "\n".join(lines)

    @staticmethod
    def format_span(report: SpanReport) -> str:
        """Format a span report; reversed ranges are flagged in red."""
        if report.span_text is None:
            span_line = "[red]end is before start[/red]"
        else:
            span_line = f"[green]{report.span_text}[/green]"
        lines = [
            f"[bold]Start[/bold]        {to_iso8601(report.start.instant)}",
            f"[bold]End[/bold]          {to_iso8601(report.end.instant)}",
            f"[bold]Elapsed[/bold]      {span_line}",
        ]
        return "\n".join(lines)
