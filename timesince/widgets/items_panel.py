"""Items panel widget with DataTable."""

from datetime import datetime
from pathlib import Path

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget
from textual.widgets import DataTable, Static

from .. import logging_bridge as log
from ..config import Settings
from ..core.relative_time import FormatStyle
from ..data.item_reader import read_items
from ..data.models import Item
from ..themes.catppuccin import COLORS
from ..utils import format_event_timestamp


def _format_value(value: float | None) -> str:
    if value is None:
        return ""
    return f"{value:g}"


class ItemsPanel(Widget):
    """Items panel showing every tracked item and its time since last event."""

    DEFAULT_CSS = """
    ItemsPanel {
        height: 1fr;
        width: 100%;
        layout: vertical;
    }

    ItemsPanel .items-header {
        height: 1;
        background: #181825;
        padding: 0 1;
    }

    ItemsPanel DataTable {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("m", "mark_event", "Mark Now"),
        # Vim-style navigation
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("g", "goto_top", "Top", show=False),
        Binding("G", "goto_bottom", "Bottom", show=False),
    ]

    class EventRecorded(Message):
        """Message sent when an event is recorded for an item."""

        def __init__(self, item: Item) -> None:
            super().__init__()
            self.item = item

    def __init__(self, data_dir: Path, settings: Settings) -> None:
        super().__init__()
        self.data_dir = data_dir
        self.settings = settings
        self.style: FormatStyle = settings.display_style
        self.items: list[Item] = []
        self.now: datetime = datetime.now(tz=settings.calendar.zone)

    def compose(self) -> ComposeResult:
        self._load_items()
        yield Static(self._build_header_text(), classes="items-header")

        table = DataTable(id="items-table")
        table.cursor_type = "row"
        table.zebra_stripes = True
        yield table

    def on_mount(self) -> None:
        """Set up the data table."""
        try:
            table = self.query_one("#items-table", DataTable)
            table.add_columns("Item", "Since", "Last Event", "Value", "Reminder", "Next Due")
            self._populate_table(table)
        except Exception as e:
            self.log.error(f"Failed to populate items table: {e}")

    def _load_items(self) -> None:
        """Load items from the data directory."""
        self.items = read_items(self.data_dir, self.settings.calendar)

    @property
    def due_count(self) -> int:
        calendar = self.settings.calendar
        return sum(1 for item in self.items if item.is_due(self.now, calendar))

    def _populate_table(self, table: DataTable, preserve_cursor: bool = False) -> None:
        """Populate the table with item data."""
        cursor_row = table.cursor_row if preserve_cursor else None

        table.clear()
        settings = self.settings
        calendar = settings.calendar
        formatter = settings.formatter
        for item in self.items:
            color = settings.highlight_color if item.is_due(self.now, calendar) else None
            open_tag = f"[{color}]" if color else ""
            close_tag = "[/]" if color else ""

            elapsed = item.elapsed_text(self.now, self.style, formatter)
            latest = item.latest_event
            last_event = (
                format_event_timestamp(latest.timestamp, self.now, settings.locale, calendar)
                if latest else ""
            )
            due_at = item.next_due_date(calendar)
            next_due = (
                format_event_timestamp(due_at, self.now, settings.locale, calendar)
                if due_at else "-"
            )

            table.add_row(
                f"{open_tag}[bold]{escape(item.name)}[/]{close_tag}",
                f"{open_tag}{elapsed}{close_tag}",
                f"{open_tag}{last_event}{close_tag}",
                f"{open_tag}{_format_value(latest.value if latest else None)}{close_tag}",
                item.reminder_summary(settings.locale, calendar),
                next_due,
                key=item.id,
            )

        if cursor_row is not None and self.items:
            table.move_cursor(row=min(cursor_row, len(self.items) - 1))

    def _build_header_text(self) -> str:
        """Build header text with item counts."""
        total = len(self.items)
        due = self.due_count
        reminding = sum(1 for item in self.items if item.config.enabled)
        return (
            f"[bold]Items[/] │ "
            f"[{self.settings.highlight_color}]Due: {due}[/] │ "
            f"[{COLORS['reminding']}]Reminding: {reminding}[/] │ "
            f"Total: {total}"
        )

    def _rerender(self) -> None:
        try:
            header = self.query_one(".items-header", Static)
            header.update(self._build_header_text())
        except Exception:
            pass
        try:
            table = self.query_one("#items-table", DataTable)
            self._populate_table(table, preserve_cursor=True)
        except Exception:
            pass

    def tick(self, now: datetime) -> None:
        """Recompute elapsed text and due state for ``now``."""
        self.now = now
        self._rerender()

    def apply_settings(self, settings: Settings) -> None:
        """Switch to new settings, keeping a manually toggled style."""
        if self.style == self.settings.display_style:
            self.style = settings.display_style
        self.settings = settings
        self._rerender()

    def toggle_style(self) -> FormatStyle:
        """Flip between the decimal and sub-unit display styles."""
        if self.style is FormatStyle.DECIMAL_MOST_SIGNIFICANT:
            self.style = FormatStyle.SUBUNITS_INTEGER
        else:
            self.style = FormatStyle.DECIMAL_MOST_SIGNIFICANT
        self._rerender()
        return self.style

    def _get_selected_index(self) -> int | None:
        try:
            table = self.query_one("#items-table", DataTable)
            if table.cursor_row is not None and table.cursor_row < len(self.items):
                return table.cursor_row
        except Exception:
            pass
        return None

    def get_selected_item(self) -> Item | None:
        """Get the currently selected item."""
        index = self._get_selected_index()
        return self.items[index] if index is not None else None

    def action_mark_event(self) -> None:
        """Record an event for the selected item at the current tick.

        The event lives in memory only; items.json is never written.
        """
        index = self._get_selected_index()
        if index is None:
            self.app.notify("No item selected", severity="warning")
            return

        updated = self.items[index].with_event(self.now)
        self.items[index] = updated
        log.log(f"Recorded event for {updated.name!r} at {self.now.isoformat()}")
        self._rerender()
        self.post_message(self.EventRecorded(updated))
        self.app.notify(f"Marked {updated.name}")

    def action_cursor_down(self) -> None:
        """Move cursor down (vim j)."""
        try:
            self.query_one("#items-table", DataTable).action_cursor_down()
        except Exception:
            pass

    def action_cursor_up(self) -> None:
        """Move cursor up (vim k)."""
        try:
            self.query_one("#items-table", DataTable).action_cursor_up()
        except Exception:
            pass

    def action_goto_top(self) -> None:
        """Go to first row (vim gg)."""
        try:
            self.query_one("#items-table", DataTable).move_cursor(row=0)
        except Exception:
            pass

    def action_goto_bottom(self) -> None:
        """Go to last row (vim G)."""
        try:
            table = self.query_one("#items-table", DataTable)
            if self.items:
                table.move_cursor(row=len(self.items) - 1)
        except Exception:
            pass

    def refresh_data(self) -> None:
        """Reload items from disk and re-render.

        Events recorded in this session are dropped, since the file is the
        only source of items.
        """
        self._load_items()
        self._rerender()
