"""Calendar-aware date arithmetic in a single time zone.

Uses dateutil for the two things datetime does not do on its own:
month/year addition that clamps to the end of the month
(``relativedelta``), and DST gap handling (``tz.datetime_exists``,
``tz.resolve_imaginary``).

Sub-day units (minute, hour) are added in absolute time, so adding one
hour across a DST change is always 3600 seconds. Day and longer units are
added on the wall clock, so adding one day keeps the local clock time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta, timezone, tzinfo
from enum import Enum

from dateutil import tz
from dateutil.relativedelta import relativedelta

from .. import logging_bridge as log
from ..errors import ConfigError


class RecurrenceUnit(Enum):
    """Recurrence interval units, finest first."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def is_sub_day(self) -> bool:
        """Minute and hour intervals carry their own clock time."""
        return self in (RecurrenceUnit.MINUTE, RecurrenceUnit.HOUR)


_WALL_CLOCK_DELTAS = {
    RecurrenceUnit.DAY: "days",
    RecurrenceUnit.WEEK: "weeks",
    RecurrenceUnit.MONTH: "months",
    RecurrenceUnit.YEAR: "years",
}

_ABSOLUTE_DELTAS = {
    RecurrenceUnit.MINUTE: "minutes",
    RecurrenceUnit.HOUR: "hours",
}


@dataclass(frozen=True)
class Calendar:
    """A read-only calendar handle bound to one time zone."""

    zone: tzinfo = field(default_factory=tz.tzlocal)

    @classmethod
    def for_zone(cls, name: str | None) -> "Calendar":
        """Build a calendar for an IANA zone name (None means local time).

        Raises:
            ConfigError: If the zone name is unknown.
        """
        if not name:
            return cls()
        zone = tz.gettz(name)
        if zone is None:
            raise ConfigError(f"Unknown time zone: {name}")
        return cls(zone)

    @classmethod
    def utc(cls) -> "Calendar":
        return cls(timezone.utc)

    def localize(self, value: datetime) -> datetime:
        """Express value in this calendar's zone.

        Naive datetimes are read as wall-clock time in the zone.
        """
        if value.tzinfo is None:
            return value.replace(tzinfo=self.zone)
        return value.astimezone(self.zone)

    def add(self, value: datetime, unit: RecurrenceUnit, amount: int) -> datetime | None:
        """Add amount units to value.

        Returns:
            The shifted datetime in this calendar's zone, or None when the
            result falls outside the representable range.
        """
        local = self.localize(value)
        try:
            if unit in _ABSOLUTE_DELTAS:
                delta = timedelta(**{_ABSOLUTE_DELTAS[unit]: amount})
                return (local.astimezone(timezone.utc) + delta).astimezone(self.zone)
            shifted = local + relativedelta(**{_WALL_CLOCK_DELTAS[unit]: amount})
        except (OverflowError, ValueError) as e:
            log.log_debug(f"Cannot add {amount} {unit.value}(s) to {value}: {e}")
            return None
        return tz.resolve_imaginary(shifted)

    def time_components(self, anchor: time | datetime) -> time:
        """Hour, minute and second of anchor as seen in this calendar."""
        if isinstance(anchor, datetime):
            anchor = self.localize(anchor).time()
        return time(anchor.hour, anchor.minute, anchor.second)

    def align_time_of_day(self, value: datetime, anchor: time | datetime) -> datetime:
        """Replace the time of day of value with anchor's, keeping the date.

        A merged time inside a spring-forward gap moves forward past the
        gap (02:30 becomes 03:30). Falls back to value itself when the
        merged wall time cannot be built at all.
        """
        local = self.localize(value)
        clock = self.time_components(anchor)
        try:
            merged = datetime(
                local.year, local.month, local.day,
                clock.hour, clock.minute, clock.second,
                tzinfo=self.zone,
            )
        except (ValueError, OverflowError) as e:
            log.log_debug(f"Cannot align {value} to {clock}: {e}")
            return local
        if not tz.datetime_exists(merged):
            log.log_debug(f"Aligned time {merged} does not exist in {self.zone}; moving forward")
            return tz.resolve_imaginary(merged)
        return merged
