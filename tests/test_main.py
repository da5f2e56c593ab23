"""Tests for the timesince entry point."""

from unittest.mock import patch

import pytest

from timesince import logging_bridge
from timesince.__main__ import main
from timesince.app import TimeSinceApp
from timesince.config import HOME_ENV


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging_bridge.init(log_level="INFO")


def test_exits_without_data_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(HOME_ENV, str(tmp_path / "nowhere"))

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    assert "No .timesince directory found" in capsys.readouterr().out


def test_exits_on_bad_settings(tmp_data_dir, monkeypatch, capsys):
    monkeypatch.setenv(HOME_ENV, str(tmp_data_dir))
    (tmp_data_dir / "settings.json").write_text('{"refresh_interval": 0}')

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    assert "refresh_interval" in capsys.readouterr().out


def test_runs_app_and_logs_to_data_dir(tmp_data_dir, monkeypatch):
    monkeypatch.setenv(HOME_ENV, str(tmp_data_dir))
    monkeypatch.delenv("DEBUG", raising=False)

    with patch.object(TimeSinceApp, "run") as run:
        main()

    run.assert_called_once()
    assert "Starting timesince" in (tmp_data_dir / "timesince.log").read_text()
