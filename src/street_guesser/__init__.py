"""Round engine for a street-level geography guessing game."""

__version__ = "0.1.0"
