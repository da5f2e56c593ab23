"""Concise elapsed-time strings.

Two styles:

- subunits: one to three integer components, largest unit first.
  ``"3hr 12min ago"``, ``"1d 3hr ago"``, ``"45s"``.
- decimal most significant: the largest unit that fits, one fractional
  digit. ``"1.5 hr ago"``, ``"2.3 d"``.

Months and years use average lengths (30.436875 and 365.2425 days) rather
than calendar decomposition, so month/year scale output drifts slightly
from calendar reality. Everything here is a pure function of its inputs.

Example:
    >>> from datetime import datetime, timedelta
    >>> start = datetime(2024, 1, 1, 12, 0)
    >>> subunits(start, start + timedelta(hours=3, minutes=12))
    '3hr 12min ago'
    >>> decimal_most_significant(start, start + timedelta(minutes=90))
    '1.5 hr ago'
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum


class TimeUnit(Enum):
    """Display units, finest first."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def standard_interval(self) -> int:
        """Average length of the unit in seconds."""
        return STANDARD_INTERVALS[self]

    @property
    def short_symbol(self) -> str:
        return SHORT_SYMBOLS[self]


class FormatStyle(Enum):
    """Elapsed-time display style. Values are the stored setting names."""

    SUBUNITS_INTEGER = "subUnits"
    DECIMAL_MOST_SIGNIFICANT = "tenths"


STANDARD_INTERVALS: dict[TimeUnit, int] = {
    TimeUnit.SECOND: 1,
    TimeUnit.MINUTE: 60,
    TimeUnit.HOUR: 3_600,
    TimeUnit.DAY: 86_400,
    TimeUnit.WEEK: 604_800,
    TimeUnit.MONTH: 2_629_746,  # 30.436875 days
    TimeUnit.YEAR: 31_556_952,  # 365.2425 days
}

SHORT_SYMBOLS: dict[TimeUnit, str] = {
    TimeUnit.SECOND: "s",
    TimeUnit.MINUTE: "min",
    TimeUnit.HOUR: "hr",
    TimeUnit.DAY: "d",
    TimeUnit.WEEK: "wk",
    TimeUnit.MONTH: "mo",
    TimeUnit.YEAR: "yr",
}

UNITS_DESCENDING: tuple[TimeUnit, ...] = (
    TimeUnit.YEAR,
    TimeUnit.MONTH,
    TimeUnit.WEEK,
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
)

MIN_COMPONENTS = 1
MAX_COMPONENTS = 3

_RELATIVE_SUFFIX = " ago"
_ONE_PLACE = Decimal("0.1")


def elapsed_seconds(start: datetime, end: datetime) -> float:
    """Seconds from start to end, clamped at zero."""
    return max(0.0, (end - start).total_seconds())


def most_significant_unit(duration: float) -> TimeUnit:
    """Largest unit whose average length fits in duration (seconds)."""
    for unit in UNITS_DESCENDING:
        if duration >= unit.standard_interval:
            return unit
    return TimeUnit.SECOND


def one_fraction_digit(value: float) -> str:
    """Render value with exactly one fractional digit, rounding half to even."""
    return str(Decimal(repr(value)).quantize(_ONE_PLACE, rounding=ROUND_HALF_EVEN))


def format_subunits(
    duration: float,
    max_components: int = 2,
    show_relative: bool = True,
) -> str:
    """Integer breakdown of a duration given in seconds.

    Args:
        duration: Elapsed seconds. Negative values count as zero.
        max_components: Number of components to show, clamped to 1..3.
        show_relative: Append " ago".

    Returns:
        String like "1d 3hr ago". Never empty; zero gives "0s".
    """
    remaining = max(0.0, duration)
    limit = max(MIN_COMPONENTS, min(max_components, MAX_COMPONENTS))

    parts: list[str] = []
    for unit in UNITS_DESCENDING:
        seconds = unit.standard_interval
        if remaining >= seconds or (unit is TimeUnit.SECOND and not parts):
            value = int(remaining // seconds)
            if value > 0 or not parts:
                parts.append(f"{value}{unit.short_symbol}")
                remaining -= value * seconds
        if len(parts) == limit:
            break

    text = " ".join(parts)
    return text + _RELATIVE_SUFFIX if show_relative else text


def format_decimal(duration: float, show_relative: bool = True) -> str:
    """Duration in seconds as its most significant unit with one decimal."""
    duration = max(0.0, duration)
    unit = most_significant_unit(duration)
    value = one_fraction_digit(duration / unit.standard_interval)
    text = f"{value} {unit.short_symbol}"
    return text + _RELATIVE_SUFFIX if show_relative else text


def subunits(
    start: datetime,
    end: datetime,
    max_components: int = 2,
    show_relative: bool = True,
) -> str:
    """Integer breakdown of the time from start to end."""
    return format_subunits(elapsed_seconds(start, end), max_components, show_relative)


def decimal_most_significant(
    start: datetime,
    end: datetime,
    show_relative: bool = True,
) -> str:
    """Time from start to end in its most significant unit, one decimal."""
    return format_decimal(elapsed_seconds(start, end), show_relative)


def format_elapsed(
    start: datetime,
    end: datetime,
    style: FormatStyle = FormatStyle.DECIMAL_MOST_SIGNIFICANT,
    max_components: int = 2,
    show_relative: bool = True,
) -> str:
    """Format start..end in the requested style."""
    if style is FormatStyle.SUBUNITS_INTEGER:
        return subunits(start, end, max_components, show_relative)
    return decimal_most_significant(start, end, show_relative)


@dataclass(frozen=True)
class RelativeTimeFormatter:
    """Formatter with fixed display defaults, shared by UI code.

    Stateless; one instance can serve every widget.
    """

    max_components: int = 2
    show_relative: bool = True

    def subunits(self, start: datetime, end: datetime) -> str:
        return subunits(start, end, self.max_components, self.show_relative)

    def decimal_most_significant(self, start: datetime, end: datetime) -> str:
        return decimal_most_significant(start, end, self.show_relative)

    def format(self, start: datetime, end: datetime, style: FormatStyle) -> str:
        return format_elapsed(start, end, style, self.max_components, self.show_relative)
