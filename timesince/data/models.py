"""Item and Event value types.

These are plain frozen dataclasses. Recording an event produces a new
Item; nothing here is mutated in place or persisted.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Iterable

from ..core.calendar import Calendar
from ..core.relative_time import FormatStyle, RelativeTimeFormatter
from ..core.remind import RecurrenceConfig, is_due, next_due_date, reminder_summary
from ..errors import DuplicateItemNameError


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Event:
    """A timestamped occurrence in an item's history."""

    timestamp: datetime
    value: float | None = None
    notes: str | None = None
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class Item:
    """A tracked thing with its event history and reminder rule."""

    name: str
    created_at: datetime
    description: str = ""
    config: RecurrenceConfig = field(default_factory=RecurrenceConfig.default)
    history: tuple[Event, ...] = ()
    id: str = field(default_factory=_new_id)

    @property
    def latest_event(self) -> Event | None:
        if not self.history:
            return None
        return max(self.history, key=lambda e: e.timestamp)

    @property
    def latest_event_date(self) -> datetime | None:
        event = self.latest_event
        return event.timestamp if event else None

    @property
    def effective_last_event_date(self) -> datetime:
        """Latest event timestamp, or creation time for an empty history."""
        return self.latest_event_date or self.created_at

    def with_event(
        self,
        timestamp: datetime,
        value: float | None = None,
        notes: str | None = None,
    ) -> "Item":
        """Return a copy of this item with a new event appended."""
        event = Event(timestamp=timestamp, value=value, notes=notes)
        return replace(self, history=self.history + (event,))

    def next_due_date(self, calendar: Calendar | None = None) -> datetime | None:
        return next_due_date(self.effective_last_event_date, self.config, calendar)

    def is_due(self, now: datetime, calendar: Calendar | None = None) -> bool:
        return is_due(now, self.effective_last_event_date, self.config, calendar)

    def elapsed_text(
        self,
        now: datetime,
        style: FormatStyle = FormatStyle.DECIMAL_MOST_SIGNIFICANT,
        formatter: RelativeTimeFormatter | None = None,
    ) -> str:
        """Time since the last event, e.g. "1.5 hr ago".

        ``formatter`` carries the component count and suffix settings;
        the default shows two components with " ago".
        """
        formatter = formatter or RelativeTimeFormatter()
        return formatter.format(self.effective_last_event_date, now, style)

    def reminder_summary(self, locale: str = "en_US", calendar: Calendar | None = None) -> str:
        return reminder_summary(self.config, locale, calendar)


def name_exists(items: Iterable[Item], name: str, excluding: str | None = None) -> bool:
    """Check whether another item already uses ``name``.

    Names are compared after trimming surrounding whitespace.

    Args:
        items: Items to search.
        name: Candidate name.
        excluding: Item id to ignore, so an item can keep its own name.
    """
    trimmed = name.strip()
    return any(
        item.name.strip() == trimmed and item.id != excluding
        for item in items
    )


def validate_unique_name(items: Iterable[Item], name: str, excluding: str | None = None) -> None:
    """Raise DuplicateItemNameError if ``name`` is already taken."""
    if name_exists(items, name, excluding):
        raise DuplicateItemNameError(name.strip())
