"""Main Textual application for the timesince TUI."""

from datetime import datetime
from pathlib import Path
from typing import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from . import logging_bridge as log
from .config import Settings, load_settings
from .data.item_reader import clear_cache
from .data.watcher import DataDirWatcher
from .errors import ConfigError
from .themes.catppuccin import CATPPUCCIN_THEME
from .widgets.header import TimeSinceHeader
from .widgets.items_panel import ItemsPanel


class TimeSinceApp(App):
    """Main timesince TUI application."""

    TITLE = "Time Since"
    CSS = CATPPUCCIN_THEME

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Reload"),
        Binding("t", "toggle_style", "Style"),
        Binding("?", "help", "Help"),
    ]

    def __init__(
        self,
        data_dir: Path,
        settings: Settings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Create the app.

        Args:
            data_dir: Path to the .timesince directory.
            settings: Settings to use instead of loading settings.json.
            clock: Source of "now" for each tick. Defaults to the wall clock
                in the configured time zone.
        """
        super().__init__()
        self.data_dir = data_dir
        self.settings = settings or load_settings(data_dir)
        self.watcher = DataDirWatcher(data_dir)
        self._clock = clock

    def now(self) -> datetime:
        if self._clock is not None:
            return self._clock()
        return datetime.now(tz=self.settings.calendar.zone)

    def compose(self) -> ComposeResult:
        yield TimeSinceHeader(self.data_dir, self.settings.highlight_color)
        yield ItemsPanel(self.data_dir, self.settings)
        yield Footer()

    async def on_mount(self) -> None:
        """Start file watcher and the refresh tick on mount."""
        self.watcher.on_items_change(self._on_items_change)
        self.watcher.on_settings_change(self._on_settings_change)
        self.watcher.start()

        self._tick()
        self.set_interval(self.settings.refresh_interval, self._tick)

    def on_unmount(self) -> None:
        """Stop file watcher on unmount."""
        self.watcher.stop()

    async def _on_items_change(self) -> None:
        """Handle items.json changes."""
        try:
            self.query_one(ItemsPanel).refresh_data()
        except Exception:
            pass
        self._tick()

    async def _on_settings_change(self) -> None:
        """Handle settings.json changes."""
        try:
            settings = load_settings(self.data_dir)
        except ConfigError as e:
            log.log_error(str(e))
            self.notify(str(e), title="Settings not applied", severity="error")
            return

        self.settings = settings
        try:
            self.query_one(TimeSinceHeader).highlight_color = settings.highlight_color
            self.query_one(ItemsPanel).apply_settings(settings)
        except Exception:
            pass
        self._tick()

    def _tick(self) -> None:
        """Recompute elapsed times and due state for the current time."""
        now = self.now()
        try:
            panel = self.query_one(ItemsPanel)
            panel.tick(now)
            self.query_one(TimeSinceHeader).update_stats(
                now, len(panel.items), panel.due_count, panel.style,
            )
        except Exception:
            pass

    def action_toggle_style(self) -> None:
        """Switch between decimal and sub-unit elapsed times."""
        try:
            self.query_one(ItemsPanel).toggle_style()
        except Exception:
            pass
        self._tick()

    def action_refresh(self) -> None:
        """Manually reload items from disk."""
        clear_cache()
        try:
            self.query_one(ItemsPanel).refresh_data()
        except Exception:
            pass
        self._tick()

    def action_help(self) -> None:
        """Show help dialog."""
        self.notify(
            "Keyboard shortcuts:\n"
            "m: Mark event now │ t: Toggle style │ r: Reload │ q: Quit\n"
            "j/k: Move │ g/G: Top/Bottom",
            title="Help",
            timeout=5,
        )
