"""Statly: character, line and size stats for the active editor file."""

__version__ = "1.0.0"
