"""Statly exception hierarchy.

Host-level failures are raised as one of these so callers can tell a bad
path apart from a subscription that has already been released.
"""

from __future__ import annotations


class StatlyError(Exception):
    """Base for all Statly exceptions."""


class EditorError(StatlyError):
    """Opening, selecting or saving a file failed."""


class SubscriptionError(StatlyError):
    """Releasing a bus subscription that is no longer attached."""
