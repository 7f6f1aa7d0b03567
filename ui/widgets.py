"""Custom UI widgets for datetasks."""
from textual.widgets import Static

from config import config


class CenteredFooter(Static):
    """Custom footer with centered key hints."""

    def __init__(self):
        super().__init__()
        self.update("[dim]Enter to inspect  •  [/dim][bold]F1[/bold] [dim]for Help  •  [/dim][bold]Ctrl+Q[/bold] [dim]to Quit[/dim]")

    DEFAULT_CSS = f"""
    CenteredFooter {{
        background: transparent;
        color: {config.color_primary};
        dock: bottom;
        height: 1;
        text-align: center;
    }}
    """
