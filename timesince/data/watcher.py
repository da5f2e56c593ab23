"""File watcher for the data directory."""

import asyncio
from pathlib import Path
from typing import Awaitable, Callable

from .. import logging_bridge as log
from ..config import SETTINGS_FILE
from .item_reader import ITEMS_FILE


class DataDirWatcher:
    """Watch items.json and settings.json and notify callbacks on change."""

    def __init__(self, data_dir: Path, poll_interval: float = 2.0):
        """Initialize watcher.

        Args:
            data_dir: Path to the .timesince directory.
            poll_interval: Seconds between polls (default 2.0).
        """
        self.data_dir = data_dir
        self.poll_interval = poll_interval
        self._running = False
        self._task: asyncio.Task | None = None

        # Seeded with current mtimes so start() does not fire for unchanged files
        self._mtimes: dict[str, float] = {
            "items": self._get_mtime(data_dir / ITEMS_FILE),
            "settings": self._get_mtime(data_dir / SETTINGS_FILE),
        }

        self._callbacks: dict[str, list[Callable[[], Awaitable[None]]]] = {
            "items": [],
            "settings": [],
        }

    def on_items_change(self, callback: Callable[[], Awaitable[None]]) -> None:
        """Register callback for items.json changes."""
        self._callbacks["items"].append(callback)

    def on_settings_change(self, callback: Callable[[], Awaitable[None]]) -> None:
        """Register callback for settings.json changes."""
        self._callbacks["settings"].append(callback)

    def _get_mtime(self, path: Path) -> float:
        """Get modification time of a file, 0 if not exists."""
        try:
            return path.stat().st_mtime
        except OSError:
            return 0

    async def _notify(self, category: str) -> None:
        """Notify all callbacks for a category."""
        for callback in self._callbacks[category]:
            try:
                await callback()
            except Exception as e:
                log.log_error(f"{category} change callback failed: {e!r}")

    async def check(self) -> None:
        """Compare mtimes once and fire callbacks for changed files."""
        for category, name in (("items", ITEMS_FILE), ("settings", SETTINGS_FILE)):
            mtime = self._get_mtime(self.data_dir / name)
            if mtime != self._mtimes.get(category, 0):
                self._mtimes[category] = mtime
                log.log_debug(f"{name} changed")
                await self._notify(category)

    async def _poll(self) -> None:
        """Poll for changes until stopped."""
        while self._running:
            await self.check()
            await asyncio.sleep(self.poll_interval)

    def start(self) -> None:
        """Start watching for changes."""
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._poll())

    def stop(self) -> None:
        """Stop watching for changes."""
        self._running = False
        if self._task:
            self._task.cancel()
            self._task = None
