"""Help screen listing accepted input formats."""
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.binding import Binding
from textual import events

from config import config


class HelpScreen(Screen):
    """Modal screen describing what the inspector accepts."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    CSS = f"""
    HelpScreen {{
        align: center middle;
        background: rgba(26, 26, 46, 0.9);
    }}

    #help_container {{
        width: 80;
        height: auto;
        max-height: 90%;
        background: {config.color_bg_medium};
        border: thick {config.color_primary};
        padding: 1 2;
    }}

    #help_title {{
        text-align: center;
        text-style: bold;
        color: {config.color_primary};
        margin-bottom: 1;
    }}

    #help_content {{
        height: auto;
        overflow-y: auto;
        color: {config.color_text};
    }}
    """

    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with VerticalScroll(id="help_container"):
            yield Static("Accepted Input", id="help_title")
            yield Static(self.get_help_text(), id="help_content")

    def get_help_text(self) -> str:
        """Get formatted help text."""
        return f"""[bold]Single date[/bold]
2016-01-19T08:07:37Z              ISO 8601, Zulu
2016-01-19T16:07:37+00:00         ISO 8601, offset
Tue, 26 Jan 2016 13:48:02 GMT     RFC 2822
Sun, 17 May 1998 03:00:00 GMT+01  RFC 2822, GMT offset
December 17, 1995 03:24:00        Loose form

Dates without a zone are read as {config.naive_timezone}.
Shows the UTC instant, leap year and the angle between clock hands.

[bold]Time span[/bold]
start .. end                      Elapsed time as HH:mm:ss.sss
2000-01-01T10:00 .. 2000-01-01T15:20:10.453

[bold]General[/bold]
F1            Show this help
Ctrl+Q        Quit

[dim]Press Esc to close this help[/dim]"""

    def on_key(self, event: events.Key) -> None:
        """Block all keys except Esc and scrolling."""
        if event.key not in ("escape", "up", "down"):
            event.prevent_default()
            event.stop()

    def action_dismiss(self) -> None:
        """Close the help screen."""
        self.dismiss()
