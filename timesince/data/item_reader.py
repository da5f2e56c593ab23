"""Reader for the items.json file in the data directory.

Returns an empty list on file-not-found or parse error; a malformed item
is skipped with a warning rather than failing the whole file. Results are
cached by file mtime so the once-per-second UI tick can call in freely.
"""

import json
from datetime import datetime, time
from pathlib import Path
from typing import Any

from dateutil import parser as date_parser

from .. import logging_bridge as log
from ..core.calendar import Calendar, RecurrenceUnit
from ..core.remind import RecurrenceConfig
from .models import Event, Item, name_exists

ITEMS_FILE = "items.json"

_items_cache: dict[str, tuple[float, list[Item]]] = {}


def _parse_timestamp(raw: str, calendar: Calendar) -> datetime:
    return calendar.localize(date_parser.isoparse(raw))


def _parse_config(raw: dict[str, Any] | None) -> RecurrenceConfig:
    """Parse an item's reminder rule; a missing rule gives the default."""
    if not raw:
        return RecurrenceConfig.default()
    remind_at = raw.get("remind_at")
    enabled = raw.get("enabled", False)
    if not isinstance(enabled, bool):
        raise ValueError(f"enabled must be true or false, got {enabled!r}")
    return RecurrenceConfig(
        enabled=enabled,
        anchor_time_of_day=time.fromisoformat(remind_at) if remind_at else time(9, 0),
        interval_count=int(raw.get("interval", 1)),
        unit=RecurrenceUnit(raw.get("unit", "day")),
        name=raw.get("name", "Default"),
    )


def _parse_event(raw: dict[str, Any], calendar: Calendar) -> Event:
    kwargs: dict[str, Any] = {
        "timestamp": _parse_timestamp(raw["timestamp"], calendar),
        "value": float(raw["value"]) if raw.get("value") is not None else None,
        "notes": raw.get("notes"),
    }
    if raw.get("id"):
        kwargs["id"] = str(raw["id"])
    return Event(**kwargs)


def parse_item(raw: dict[str, Any], calendar: Calendar) -> Item:
    """Parse one item entry.

    Raises:
        KeyError, ValueError, TypeError: If the entry is malformed.
    """
    history = tuple(_parse_event(e, calendar) for e in raw.get("events", []))
    if "created_at" in raw:
        created_at = _parse_timestamp(raw["created_at"], calendar)
    elif history:
        created_at = min(e.timestamp for e in history)
    else:
        raise KeyError("created_at")

    kwargs: dict[str, Any] = {
        "name": raw["name"].strip(),
        "description": raw.get("description", ""),
        "created_at": created_at,
        "config": _parse_config(raw.get("config")),
        "history": history,
    }
    if raw.get("id"):
        kwargs["id"] = str(raw["id"])
    return Item(**kwargs)


def read_items(data_dir: Path, calendar: Calendar | None = None) -> list[Item]:
    """Read all items from ``data_dir/items.json``.

    Args:
        data_dir: Path to the .timesince directory.
        calendar: Calendar that naive timestamps are read in.

    Returns:
        Items in file order. Duplicate names or ids after the first are
        dropped.
    """
    items_path = data_dir / ITEMS_FILE
    calendar = calendar or Calendar()
    cache_key = f"{items_path}|{calendar.zone!r}"

    try:
        mtime = items_path.stat().st_mtime
    except OSError:
        return []

    cached = _items_cache.get(cache_key)
    if cached and cached[0] == mtime:
        return list(cached[1])

    try:
        data = json.loads(items_path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        log.log_warn(f"Cannot read {items_path}: {e}")
        return []

    raw_items = data.get("items", []) if isinstance(data, dict) else []
    items: list[Item] = []
    # Item ids key the table rows, so they must be unique
    seen_ids: set[str] = set()
    for index, raw in enumerate(raw_items):
        try:
            item = parse_item(raw, calendar)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            log.log_warn(f"Skipping malformed item #{index} in {items_path}: {e!r}")
            continue
        if name_exists(items, item.name):
            log.log_warn(f"Skipping duplicate item name {item.name!r} in {items_path}")
            continue
        if item.id in seen_ids:
            log.log_warn(f"Skipping duplicate item id {item.id!r} in {items_path}")
            continue
        seen_ids.add(item.id)
        items.append(item)

    log.log_debug(f"Loaded {len(items)} item(s) from {items_path}")
    _items_cache[cache_key] = (mtime, items)
    return list(items)


def clear_cache() -> None:
    """Drop cached results so the next read goes to disk."""
    _items_cache.clear()
