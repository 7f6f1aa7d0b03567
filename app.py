"""Terminal viewer for the datetasks helpers."""
import structlog
from textual.app import App, ComposeResult
from textual.widgets import Header, Static, Input
from textual.containers import Container
from textual.binding import Binding

from business_logic.inspector import DateInspector
from config import config, configure_logging
from ui.help_screen import HelpScreen
from ui.report_widget import DateReportWidget
from ui.widgets import CenteredFooter

logger = structlog.get_logger(__name__)


class DateTasksApp(App):
    """Inspect dates and time spans typed at the prompt."""

    TITLE = "datetasks"

    CSS = f"""
    Screen {{
        background: {config.color_bg_dark};
    }}

    Header {{
        background: {config.color_bg_medium};
        color: {config.color_primary};
    }}

    #title_header {{
        height: 3;
        content-align: center middle;
        background: {config.color_primary};
        color: #ffffff;
        text-style: bold;
    }}

    #report {{
        height: 1fr;
        padding: 1 2;
        background: {config.color_bg_dark};
    }}

    DateReportWidget {{
        height: auto;
        color: {config.color_text};
    }}

    #input_container {{
        height: auto;
        padding: 1;
        background: {config.color_bg_dark};
    }}

    Input {{
        margin: 0 1;
        background: {config.color_bg_medium};
        color: #ffffff;
        border: tall {config.color_secondary};
    }}

    Input:focus {{
        border: tall {config.color_primary};
    }}
    """

    BINDINGS = [
        Binding("f1", "show_help", "Help", show=False),
        Binding("ctrl+q", "quit", "Quit", show=False),
    ]

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        yield Header()
        yield Static("Date inspector", id="title_header")
        yield Container(DateReportWidget(), id="report")
        yield Container(
            Input(placeholder="2016-01-19T08:07:37Z  or  start .. end", id="date_input"),
            id="input_container",
        )
        yield CenteredFooter()

    def on_mount(self) -> None:
        report_widget = self.query_one(DateReportWidget)
        report_widget.update(report_widget.render_report())
        self.query_one("#date_input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Inspect the submitted text and show the result."""
        value = event.value.strip()
        if not value:
            return

        if DateInspector.is_span_input(value):
            report = DateInspector.inspect_span(value)
        else:
            report = DateInspector.inspect(value)

        report_widget = self.query_one(DateReportWidget)
        if report is None:
            logger.info("inspect_failed", value=value)
            report_widget.show_error(value)
        else:
            report_widget.show_report(report)
        event.input.value = ""

    def action_show_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())


def main():
    """Run the application."""
    configure_logging()
    app = DateTasksApp()
    app.run()


if __name__ == "__main__":
    main()
