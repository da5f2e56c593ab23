"""Exceptions raised by timesince.

The formatting and due-date core never raises for bad values; these are
for the loading layers around it.
"""


class TimeSinceError(Exception):
    """Base class for timesince errors."""


class ConfigError(TimeSinceError):
    """Settings file is malformed or names an unknown value."""


class DuplicateItemNameError(TimeSinceError):
    """An item with the same (trimmed) name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__("An item with this name already exists.")
        self.name = name
