"""Settings loading and dataclasses.

Parses ``settings.json`` from the data directory into a typed dataclass.
A missing file means all defaults; a present but malformed file is an
error, since silently ignoring the user's settings hides typos.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .core.calendar import Calendar
from .core.relative_time import MAX_COMPONENTS, MIN_COMPONENTS, FormatStyle, RelativeTimeFormatter
from .errors import ConfigError
from .themes.catppuccin import COLORS

SETTINGS_FILE = "settings.json"
DATA_DIR_NAME = ".timesince"
HOME_ENV = "TIMESINCE_HOME"

DEFAULT_HIGHLIGHT_COLOR = COLORS["due"]


@dataclass(frozen=True)
class Settings:
    """App-wide display settings."""

    display_style: FormatStyle = FormatStyle.DECIMAL_MOST_SIGNIFICANT
    max_components: int = 2
    show_relative: bool = True
    timezone: str | None = None
    locale: str = "en_US"
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR
    refresh_interval: float = 1.0
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def calendar(self) -> Calendar:
        return Calendar.for_zone(self.timezone)

    @property
    def formatter(self) -> RelativeTimeFormatter:
        return RelativeTimeFormatter(self.max_components, self.show_relative)


def _parse_settings(raw: dict[str, Any]) -> Settings:
    """Parse a raw settings dict into Settings."""
    defaults = Settings()

    style_name = raw.get("display_style", defaults.display_style.value)
    try:
        display_style = FormatStyle(style_name)
    except ValueError:
        choices = ", ".join(s.value for s in FormatStyle)
        raise ConfigError(f"display_style must be one of {choices}, got {style_name!r}") from None

    try:
        max_components = int(raw.get("max_components", defaults.max_components))
        refresh_interval = float(raw.get("refresh_interval", defaults.refresh_interval))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid number in settings: {e}") from None
    if refresh_interval <= 0:
        raise ConfigError("refresh_interval must be positive")

    show_relative = raw.get("show_relative", defaults.show_relative)
    if not isinstance(show_relative, bool):
        raise ConfigError(f"show_relative must be true or false, got {show_relative!r}")

    settings = Settings(
        display_style=display_style,
        max_components=max(MIN_COMPONENTS, min(max_components, MAX_COMPONENTS)),
        show_relative=show_relative,
        timezone=raw.get("timezone") or None,
        locale=raw.get("locale", defaults.locale),
        highlight_color=raw.get("highlight_color", defaults.highlight_color),
        refresh_interval=refresh_interval,
        log_level=str(raw.get("log_level", defaults.log_level)).upper(),
        log_file=raw.get("log_file") or None,
    )
    # Fail at load time rather than on the first tick
    settings.calendar
    return settings


def load_settings(data_dir: Path) -> Settings:
    """Load settings from ``data_dir/settings.json``.

    Args:
        data_dir: Path to the .timesince directory.

    Returns:
        Settings, with defaults for anything not given.

    Raises:
        ConfigError: If the file exists but cannot be parsed or holds bad values.
    """
    settings_path = data_dir / SETTINGS_FILE
    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path) as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read {settings_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{settings_path} must hold a JSON object")
    return _parse_settings(raw)


def find_data_dir(start: Path | None = None, max_levels: int = 10) -> Path | None:
    """Locate the data directory.

    ``$TIMESINCE_HOME`` wins when set; otherwise the first ``.timesince``
    directory found in ``start`` or its parents.
    """
    env_home = os.environ.get(HOME_ENV)
    if env_home:
        path = Path(env_home).expanduser()
        return path if path.is_dir() else None

    check_dir = start or Path.cwd()
    for _ in range(max_levels):
        candidate = check_dir / DATA_DIR_NAME
        if candidate.is_dir():
            return candidate
        if check_dir.parent == check_dir:
            break
        check_dir = check_dir.parent
    return None
