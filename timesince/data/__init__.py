"""Data layer for timesince."""

from .models import (
    Event,
    Item,
    name_exists,
    validate_unique_name,
)

__all__ = [
    "Event",
    "Item",
    "name_exists",
    "validate_unique_name",
]
