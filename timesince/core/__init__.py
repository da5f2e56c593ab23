"""Elapsed-time formatting and reminder due-date logic."""

from .calendar import Calendar, RecurrenceUnit
from .relative_time import (
    FormatStyle,
    RelativeTimeFormatter,
    TimeUnit,
    decimal_most_significant,
    format_elapsed,
    subunits,
)
from .remind import (
    RecurrenceConfig,
    is_due,
    next_due_date,
    reminder_summary,
)

__all__ = [
    "Calendar",
    "RecurrenceUnit",
    "FormatStyle",
    "RelativeTimeFormatter",
    "TimeUnit",
    "decimal_most_significant",
    "format_elapsed",
    "subunits",
    "RecurrenceConfig",
    "is_due",
    "next_due_date",
    "reminder_summary",
]
