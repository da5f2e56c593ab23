"""Shared utilities for the timesince TUI."""

from datetime import datetime

from .core.calendar import Calendar
from .core.remind import short_time

_US_DATE_LOCALES = frozenset({"en", "en_US"})


def format_event_timestamp(
    timestamp: datetime,
    now: datetime,
    locale: str = "en_US",
    calendar: Calendar | None = None,
) -> str:
    """Format an event timestamp as a short date and time.

    Args:
        timestamp: When the event happened.
        now: Current time, used for the relative day names.
        locale: Locale identifier for the date and time style.
        calendar: Calendar the day boundaries are taken in.

    Returns:
        String like "Today, 2:30 PM", "Yesterday, 9:05 AM", "1/15/24, 2:30 PM",
        or "2024-01-15, 14:30" for non-US locales.
    """
    calendar = calendar or Calendar()
    local = calendar.localize(timestamp)
    days_ago = (calendar.localize(now).date() - local.date()).days
    time_str = short_time(local.time(), locale)

    if days_ago == 0:
        return f"Today, {time_str}"
    if days_ago == 1:
        return f"Yesterday, {time_str}"

    if locale.replace("-", "_") in _US_DATE_LOCALES:
        date_str = f"{local.month}/{local.day}/{local.year % 100:02d}"
    else:
        date_str = local.strftime("%Y-%m-%d")
    return f"{date_str}, {time_str}"
