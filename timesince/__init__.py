"""Track how long it has been since things happened."""

__version__ = "0.1.0"
