"""Header widget for the timesince TUI."""

from datetime import datetime
from pathlib import Path

from textual.widgets import Static

from ..core.relative_time import FormatStyle
from ..themes.catppuccin import COLORS

_STYLE_LABELS = {
    FormatStyle.DECIMAL_MOST_SIGNIFICANT: "tenths",
    FormatStyle.SUBUNITS_INTEGER: "sub-units",
}


class TimeSinceHeader(Static):
    """One-line header showing the clock and item counts."""

    DEFAULT_CSS = """
    TimeSinceHeader {
        background: #181825;
        color: #cdd6f4;
        height: 1;
        dock: top;
        padding: 0 1;
    }
    """

    def __init__(self, data_dir: Path, highlight_color: str = COLORS["due"]) -> None:
        super().__init__("")
        self.data_dir = data_dir
        self.highlight_color = highlight_color
        self.now: datetime | None = None
        self.item_count: int = 0
        self.due_count: int = 0
        self.style: FormatStyle = FormatStyle.DECIMAL_MOST_SIGNIFICANT

    def render(self) -> str:
        """Render header content."""
        time_str = (self.now or datetime.now()).strftime("%H:%M:%S")
        location = self.data_dir.resolve().parent.name or str(self.data_dir)

        if self.due_count:
            due = f"[{self.highlight_color}]Due: {self.due_count}[/]"
        else:
            due = "Due: 0"

        return (
            f" TIME SINCE │ {location} │ {time_str} │ "
            f"Items: {self.item_count} │ {due} │ "
            f"[{COLORS['muted']}]{_STYLE_LABELS[self.style]}[/]"
        )

    def update_stats(
        self,
        now: datetime,
        item_count: int,
        due_count: int,
        style: FormatStyle,
    ) -> None:
        """Update stats (called on every tick).

        Args:
            now: Time of the tick.
            item_count: Number of items shown.
            due_count: Number of items currently due.
            style: Active elapsed-time display style.
        """
        self.now = now
        self.item_count = item_count
        self.due_count = due_count
        self.style = style
        self.refresh()
