"""Statly Dark theme for the TUI."""

from __future__ import annotations

from textual.theme import Theme

STATLY_DARK = Theme(
    name="statly-dark",
    primary="#589df6",
    secondary="#9876aa",
    accent="#cc7832",
    warning="#bbb529",
    error="#ff6b68",
    success="#6a8759",
    foreground="#a9b7c6",
    background="#2b2b2b",
    surface="#3c3f41",
    panel="#313335",
    dark=True,
)
