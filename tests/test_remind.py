"""Tests for due-date computation and reminder summaries."""

from datetime import datetime, time, timedelta, timezone

import pytest
from dateutil import tz

from timesince.core.calendar import RecurrenceUnit
from timesince.core.remind import (
    REMINDERS_OFF,
    RecurrenceConfig,
    is_due,
    next_due_date,
    reminder_summary,
    short_time,
    unit_name,
)

NEW_YORK = tz.gettz("America/New_York")


def ny(*args) -> datetime:
    return datetime(*args, tzinfo=NEW_YORK)


def rule(unit: RecurrenceUnit, interval: int = 1, at: time = time(9, 0)) -> RecurrenceConfig:
    return RecurrenceConfig(enabled=True, anchor_time_of_day=at, interval_count=interval, unit=unit)


class TestRecurrenceConfig:
    def test_default_is_off_daily_at_nine(self):
        config = RecurrenceConfig.default()
        assert config.enabled is False
        assert config.unit is RecurrenceUnit.DAY
        assert config.interval_count == 1
        assert config.anchor_time_of_day == time(9, 0)
        assert config.name == "Default"

    @pytest.mark.parametrize("count,expected", [(0, 1), (-5, 1), (1, 1), (4, 4)])
    def test_effective_interval(self, count, expected):
        assert RecurrenceConfig(interval_count=count).effective_interval == expected


class TestNextDueDate:
    """Tests for next_due_date."""

    def test_disabled_is_none(self, new_york):
        assert next_due_date(ny(2024, 5, 1, 9, 0), RecurrenceConfig.default(), new_york) is None

    def test_minutes_measured_from_event(self, new_york):
        due = next_due_date(ny(2024, 5, 2, 11, 45), rule(RecurrenceUnit.MINUTE, 30), new_york)
        assert due == ny(2024, 5, 2, 12, 15)

    @pytest.mark.parametrize("interval", [0, -5])
    def test_non_positive_interval_counts_as_one(self, new_york, interval):
        due = next_due_date(ny(2024, 5, 2, 11, 45), rule(RecurrenceUnit.MINUTE, interval), new_york)
        assert due == ny(2024, 5, 2, 11, 46)

    def test_sub_day_ignores_anchor(self, new_york):
        due = next_due_date(ny(2024, 5, 2, 11, 45), rule(RecurrenceUnit.HOUR, 2, time(6, 0)), new_york)
        assert due == ny(2024, 5, 2, 13, 45)

    def test_hours_across_fall_back(self, new_york):
        since = ny(2024, 11, 3, 0, 30)
        due = next_due_date(since, rule(RecurrenceUnit.HOUR, 2), new_york)
        gap = due.astimezone(timezone.utc) - since.astimezone(timezone.utc)
        assert gap == timedelta(hours=2)

    def test_day_aligns_to_anchor(self, new_york):
        due = next_due_date(ny(2024, 5, 1, 22, 45), rule(RecurrenceUnit.DAY), new_york)
        assert due == ny(2024, 5, 2, 9, 0)

    def test_weeks_align_to_anchor(self, new_york):
        due = next_due_date(ny(2024, 5, 1, 10, 0), rule(RecurrenceUnit.WEEK, 2, time(18, 0)), new_york)
        assert due == ny(2024, 5, 15, 18, 0)

    def test_month_clamps_then_aligns(self, new_york):
        due = next_due_date(ny(2024, 1, 31, 8, 0), rule(RecurrenceUnit.MONTH), new_york)
        assert due == ny(2024, 2, 29, 9, 0)

    def test_year_from_leap_day(self, new_york):
        due = next_due_date(ny(2024, 2, 29, 8, 0), rule(RecurrenceUnit.YEAR), new_york)
        assert due == ny(2025, 2, 28, 9, 0)

    def test_anchor_in_dst_gap_moves_forward(self, new_york):
        config = rule(RecurrenceUnit.DAY, 1, time(2, 30))
        due = next_due_date(ny(2024, 3, 9, 22, 0), config, new_york)
        assert due == ny(2024, 3, 10, 3, 30)
        assert not is_due(ny(2024, 3, 10, 3, 29), ny(2024, 3, 9, 22, 0), config, new_york)
        assert is_due(ny(2024, 3, 10, 3, 30), ny(2024, 3, 9, 22, 0), config, new_york)

    def test_overflow_is_none(self, new_york):
        assert next_due_date(ny(9999, 12, 31, 9, 0), rule(RecurrenceUnit.YEAR), new_york) is None

    def test_datetime_anchor(self, new_york):
        anchor = datetime(2024, 1, 1, 19, 30, tzinfo=timezone.utc)
        due = next_due_date(ny(2024, 1, 9, 8, 0), rule(RecurrenceUnit.DAY, 1, anchor), new_york)
        assert due == ny(2024, 1, 10, 14, 30)


class TestIsDue:
    """Tests for is_due."""

    def test_disabled_never_due(self, new_york):
        assert not is_due(ny(2030, 1, 1), ny(2024, 1, 1), RecurrenceConfig.default(), new_york)

    def test_due_from_due_date_onward(self, new_york):
        config = rule(RecurrenceUnit.DAY)
        last = ny(2024, 5, 1, 22, 45)
        due = ny(2024, 5, 2, 9, 0)
        assert not is_due(due - timedelta(seconds=1), last, config, new_york)
        assert is_due(due, last, config, new_york)
        assert is_due(due + timedelta(days=30), last, config, new_york)

    def test_now_in_other_zone(self, new_york):
        config = rule(RecurrenceUnit.DAY)
        last = ny(2024, 5, 1, 22, 45)
        # 13:00 UTC is 09:00 EDT
        assert is_due(datetime(2024, 5, 2, 13, 0, tzinfo=timezone.utc), last, config, new_york)
        assert not is_due(datetime(2024, 5, 2, 12, 59, tzinfo=timezone.utc), last, config, new_york)

    def test_overflow_never_due(self, new_york):
        assert not is_due(ny(9999, 12, 31, 23, 0), ny(9999, 12, 31, 9, 0), rule(RecurrenceUnit.YEAR), new_york)


class TestReminderSummary:
    """Tests for reminder_summary and its helpers."""

    def test_disabled(self):
        assert reminder_summary(RecurrenceConfig.default()) == REMINDERS_OFF

    def test_single_day(self, new_york):
        assert reminder_summary(rule(RecurrenceUnit.DAY, 1, time(14, 30)), calendar=new_york) == (
            "Every 1 day at 2:30 PM"
        )

    def test_plural_weeks(self, new_york):
        assert reminder_summary(rule(RecurrenceUnit.WEEK, 3, time(9, 5)), calendar=new_york) == (
            "Every 3 weeks at 9:05 AM"
        )

    def test_sub_day_has_no_clock_time(self):
        assert reminder_summary(rule(RecurrenceUnit.MINUTE, 15)) == "Every 15 minutes"
        assert reminder_summary(rule(RecurrenceUnit.HOUR, 1)) == "Every 1 hour"

    def test_non_positive_interval(self, new_york):
        assert reminder_summary(rule(RecurrenceUnit.MONTH, 0), calendar=new_york) == (
            "Every 1 month at 9:00 AM"
        )

    def test_twenty_four_hour_locale(self, new_york):
        summary = reminder_summary(rule(RecurrenceUnit.YEAR, 2, time(14, 30)), "de_DE", new_york)
        assert summary == "Every 2 years at 14:30"

    def test_datetime_anchor_uses_calendar(self, new_york):
        anchor = datetime(2024, 1, 1, 19, 30, tzinfo=timezone.utc)
        assert reminder_summary(rule(RecurrenceUnit.DAY, 1, anchor), calendar=new_york) == (
            "Every 1 day at 2:30 PM"
        )

    def test_unit_name(self):
        assert unit_name(RecurrenceUnit.DAY, 1) == "day"
        assert unit_name(RecurrenceUnit.DAY, 2) == "days"
        assert unit_name(RecurrenceUnit.MINUTE, 0) == "minutes"

    @pytest.mark.parametrize(
        "clock,locale,expected",
        [
            (time(0, 0), "en_US", "12:00 AM"),
            (time(12, 0), "en_US", "12:00 PM"),
            (time(23, 59), "en_US", "11:59 PM"),
            (time(14, 30), "en-US", "2:30 PM"),
            (time(9, 5), "fr_FR", "09:05"),
            (time(0, 0), "de_DE", "00:00"),
        ],
    )
    def test_short_time(self, clock, locale, expected):
        assert short_time(clock, locale) == expected
