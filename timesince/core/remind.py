"""Reminder "due" logic and reminder summaries.

An item with reminders on becomes due once the configured interval has
passed since its last event. Day-and-longer intervals land on the
configured clock time (the anchor), so "every 2 days at 09:00" is due at
09:00 two calendar days after the last event, whatever time that event
was recorded at. Minute and hour intervals are measured from the event
itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time

from .calendar import Calendar, RecurrenceUnit

REMINDERS_OFF = "Reminders off"

_UNIT_NAMES: dict[RecurrenceUnit, tuple[str, str]] = {
    RecurrenceUnit.MINUTE: ("minute", "minutes"),
    RecurrenceUnit.HOUR: ("hour", "hours"),
    RecurrenceUnit.DAY: ("day", "days"),
    RecurrenceUnit.WEEK: ("week", "weeks"),
    RecurrenceUnit.MONTH: ("month", "months"),
    RecurrenceUnit.YEAR: ("year", "years"),
}

# Locales whose short time style is the 12-hour clock. Everything else
# gets 24-hour "HH:MM".
_TWELVE_HOUR_LOCALES = frozenset({
    "en", "en_US", "en_CA", "en_AU", "en_NZ", "en_PH", "en_IN",
})


@dataclass(frozen=True)
class RecurrenceConfig:
    """Reminder rule attached to an item.

    Attributes:
        enabled: Whether reminders are on.
        anchor_time_of_day: Clock time day-and-longer reminders align to.
            A datetime is accepted; only its hour/minute/second are read.
        interval_count: Number of units between reminders. Values below 1
            are treated as 1.
        unit: Interval unit.
        name: Display name of the rule.
    """

    enabled: bool = False
    anchor_time_of_day: time | datetime = field(default_factory=lambda: time(9, 0))
    interval_count: int = 1
    unit: RecurrenceUnit = RecurrenceUnit.DAY
    name: str = "Default"

    @classmethod
    def default(cls) -> "RecurrenceConfig":
        """Rule given to items created without one: off, every day."""
        return cls()

    @property
    def effective_interval(self) -> int:
        return max(1, self.interval_count)


def next_due_date(
    since: datetime,
    config: RecurrenceConfig,
    calendar: Calendar | None = None,
) -> datetime | None:
    """Compute when an item last touched at ``since`` becomes due.

    Args:
        since: Last event timestamp.
        config: Reminder rule.
        calendar: Calendar/time zone for the arithmetic. Defaults to local time.

    Returns:
        The due datetime in the calendar's zone, or None if reminders are
        off or the date cannot be represented.
    """
    if not config.enabled:
        return None

    calendar = calendar or Calendar()
    added = calendar.add(since, config.unit, config.effective_interval)
    if added is None or config.unit.is_sub_day:
        return added
    return calendar.align_time_of_day(added, config.anchor_time_of_day)


def is_due(
    now: datetime,
    last_event: datetime,
    config: RecurrenceConfig,
    calendar: Calendar | None = None,
) -> bool:
    """True once ``now`` has reached the next due date after ``last_event``."""
    if not config.enabled:
        return False
    calendar = calendar or Calendar()
    due = next_due_date(last_event, config, calendar)
    if due is None:
        return False
    return calendar.localize(now) >= due


def unit_name(unit: RecurrenceUnit, count: int) -> str:
    """English unit name, singular only for a count of exactly one."""
    singular, plural = _UNIT_NAMES[unit]
    return singular if count == 1 else plural


def short_time(clock: time, locale: str = "en_US") -> str:
    """Format a clock time in the locale's short time style.

    >>> short_time(time(14, 30))
    '2:30 PM'
    >>> short_time(time(14, 30), "de_DE")
    '14:30'
    """
    normalized = locale.replace("-", "_")
    if normalized in _TWELVE_HOUR_LOCALES:
        hour = clock.hour % 12 or 12
        meridiem = "AM" if clock.hour < 12 else "PM"
        return f"{hour}:{clock.minute:02d} {meridiem}"
    return f"{clock.hour:02d}:{clock.minute:02d}"


def reminder_summary(
    config: RecurrenceConfig,
    locale: str = "en_US",
    calendar: Calendar | None = None,
) -> str:
    """Describe a reminder rule, e.g. "Every 2 weeks at 9:00 AM".

    Sub-day rules omit the clock time since they do not align to one.
    """
    if not config.enabled:
        return REMINDERS_OFF

    n = config.effective_interval
    text = f"Every {n} {unit_name(config.unit, n)}"
    if config.unit.is_sub_day:
        return text

    clock = (calendar or Calendar()).time_components(config.anchor_time_of_day)
    return f"{text} at {short_time(clock, locale)}"
