"""Logging setup shared by the core and the TUI.

Lines look like ``[2024-01-15 10:00:00] INFO: message``. The TUI owns the
terminal, so the entry point normally points ``log_file`` somewhere in the
data directory; without one, records go to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

_LEVELS = {
    "DEBUG": 1,
    "INFO": 2,
    "WARN": 3,
    "ERROR": 4,
}

_STDLIB_LEVELS = {
    1: logging.DEBUG,
    2: logging.INFO,
    3: logging.WARNING,
    4: logging.ERROR,
}

_logger = logging.getLogger("timesince")
_logger.propagate = False

_min_level = _LEVELS["INFO"]


def _format(level: str, message: str) -> str:
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return f"[{ts}] {level}: {message}"


class _BridgeFormatter(logging.Formatter):
    """Render records in the bracketed timestamp format."""

    def format(self, record: logging.LogRecord) -> str:
        level = "WARN" if record.levelno == logging.WARNING else record.levelname
        return _format(level, record.getMessage())


def init(log_level: str = "INFO", log_file: str | None = None) -> None:
    """(Re)configure the timesince logger.

    Args:
        log_level: One of DEBUG, INFO, WARN, ERROR. Unknown names fall back
            to INFO. ``DEBUG=1`` in the environment forces DEBUG.
        log_file: Append to this file instead of writing to stderr.
    """
    global _min_level

    level = log_level.upper()
    if level == "WARNING":
        level = "WARN"
    _min_level = _LEVELS.get(level, _LEVELS["INFO"])
    if os.environ.get("DEBUG") == "1":
        _min_level = _LEVELS["DEBUG"]

    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
        handler.close()

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_BridgeFormatter())
    _logger.addHandler(handler)
    _logger.setLevel(_STDLIB_LEVELS[_min_level])


def log(message: str) -> None:
    _logger.info(message)


def log_debug(message: str) -> None:
    _logger.debug(message)


def log_warn(message: str) -> None:
    _logger.warning(message)


def log_error(message: str) -> None:
    _logger.error(message)
