"""Pytest configuration and fixtures for timesince tests."""

import json
from datetime import datetime
from pathlib import Path

import pytest
from dateutil import tz

from timesince.core.calendar import Calendar
from timesince.data import item_reader

NEW_YORK = tz.gettz("America/New_York")


@pytest.fixture(autouse=True)
def _clear_item_cache():
    """Keep mtime-cached reads from leaking between tests."""
    item_reader.clear_cache()
    yield
    item_reader.clear_cache()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def data_sample(fixtures_dir: Path) -> Path:
    """Return path to the sample data directory fixture."""
    return fixtures_dir / "timesince-sample"


@pytest.fixture
def tmp_data_dir(tmp_path: Path) -> Path:
    """Create an empty temporary data directory.

    Returns the path to the .timesince directory.
    """
    data_dir = tmp_path / ".timesince"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def new_york() -> Calendar:
    """Calendar in America/New_York (DST on 2024-03-10 and 2024-11-03)."""
    return Calendar(NEW_YORK)


@pytest.fixture
def utc() -> Calendar:
    return Calendar.utc()


@pytest.fixture
def sample_now() -> datetime:
    """The "now" the sample data is written against."""
    return datetime(2024, 5, 2, 12, 0, tzinfo=NEW_YORK)


@pytest.fixture
def write_items(tmp_data_dir: Path):
    """Return a helper that writes an items.json into tmp_data_dir."""

    def _write(items: list[dict]) -> Path:
        path = tmp_data_dir / "items.json"
        path.write_text(json.dumps({"items": items}))
        item_reader.clear_cache()
        return path

    return _write
