"""Tests for utility functions."""

from datetime import datetime, timezone

from dateutil import tz

from timesince.utils import format_event_timestamp

NEW_YORK = tz.gettz("America/New_York")


def ny(*args) -> datetime:
    return datetime(*args, tzinfo=NEW_YORK)


class TestFormatEventTimestamp:
    """Tests for format_event_timestamp function."""

    def test_today(self, new_york):
        now = ny(2024, 5, 2, 18, 0)
        assert format_event_timestamp(ny(2024, 5, 2, 14, 30), now, calendar=new_york) == "Today, 2:30 PM"

    def test_yesterday(self, new_york):
        now = ny(2024, 5, 2, 0, 5)
        assert format_event_timestamp(ny(2024, 5, 1, 23, 55), now, calendar=new_york) == (
            "Yesterday, 11:55 PM"
        )

    def test_older_us_style(self, new_york):
        now = ny(2024, 5, 2, 12, 0)
        assert format_event_timestamp(ny(2024, 1, 5, 9, 5), now, calendar=new_york) == "1/5/24, 9:05 AM"

    def test_older_iso_style(self, new_york):
        now = ny(2024, 5, 2, 12, 0)
        result = format_event_timestamp(ny(2024, 1, 5, 21, 5), now, locale="de_DE", calendar=new_york)
        assert result == "2024-01-05, 21:05"

    def test_day_boundary_taken_in_calendar_zone(self, new_york):
        # 02:00 UTC on May 2 is still May 1 in New York
        event = datetime(2024, 5, 2, 2, 0, tzinfo=timezone.utc)
        now = ny(2024, 5, 2, 12, 0)
        assert format_event_timestamp(event, now, calendar=new_york) == "Yesterday, 10:00 PM"

    def test_future_timestamp_gets_date(self, new_york):
        now = ny(2024, 5, 2, 12, 0)
        assert format_event_timestamp(ny(2024, 5, 4, 8, 0), now, calendar=new_york) == "5/4/24, 8:00 AM"
