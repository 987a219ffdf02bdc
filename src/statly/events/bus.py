"""Event bus for Statly.

In-process pub/sub between the editor host and its status bar widgets.
Events are emitted by the editor manager and consumed by widgets that
subscribe for the lifetime of a host session.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from statly.exceptions import SubscriptionError

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Base event structure."""

    event_type: str
    data: dict = field(default_factory=dict)
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


# Callback type: plain function that takes an Event
EventHandler = Callable[[Event], Any]


class Subscription:
    """Handle for one registered handler.

    Closing it detaches the handler from the bus. A handle can only be
    closed once; closing it again, or after the bus was cleared, raises
    ``SubscriptionError``. Usable as a context manager.
    """

    def __init__(
        self, bus: EventBus, event_type: str | None, handler: EventHandler,
    ) -> None:
        self._bus = bus
        self.event_type = event_type
        self.handler = handler
        self._closed = False

    @property
    def active(self) -> bool:
        return not self._closed and self._bus.is_subscribed(self.event_type, self.handler)

    def close(self) -> None:
        if self._closed:
            raise SubscriptionError(
                f"Subscription to {self.event_type or '*'} already closed"
            )
        self._closed = True
        if self.event_type is None:
            removed = self._bus.unsubscribe_all(self.handler)
        else:
            removed = self._bus.unsubscribe(self.event_type, self.handler)
        if not removed:
            raise SubscriptionError(
                f"Handler for {self.event_type or '*'} is no longer attached"
            )

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info) -> None:
        if not self._closed:
            self.close()

    def __repr__(self) -> str:
        name = getattr(self.handler, "__name__", repr(self.handler))
        return f"Subscription(event_type={self.event_type!r}, handler={name})"


class EventBus:
    """In-process synchronous event bus.

    Supports:
    - subscribe(event_type, handler) for type-specific listening
    - subscribe_all(handler) for global listening (logging, debugging)
    - emit(event) dispatches to all matching handlers in order

    Handlers run on the emitting thread and complete before ``emit``
    returns.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []
        self._history: list[Event] = []
        self._max_history = 1000

    def subscribe(self, event_type: str, handler: EventHandler) -> Subscription:
        """Subscribe to a specific event type."""
        self._handlers[event_type].append(handler)
        return Subscription(self, event_type, handler)

    def subscribe_all(self, handler: EventHandler) -> Subscription:
        """Subscribe to all events."""
        self._global_handlers.append(handler)
        return Subscription(self, None, handler)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> bool:
        """Remove a handler from a specific event type.

        Returns False when the handler was not registered.
        """
        handlers = self._handlers.get(event_type, [])
        try:
            handlers.remove(handler)
        except ValueError:
            return False
        return True

    def unsubscribe_all(self, handler: EventHandler) -> bool:
        """Remove a handler from the global handlers list."""
        try:
            self._global_handlers.remove(handler)
        except ValueError:
            return False
        return True

    def is_subscribed(self, event_type: str | None, handler: EventHandler) -> bool:
        if event_type is None:
            return handler in self._global_handlers
        return handler in self._handlers.get(event_type, [])

    def emit(self, event: Event) -> None:
        """Emit an event to all matching handlers.

        A failing handler is logged and does not stop delivery.
        """
        self._history.append(event)
        if len(self._history) > self._max_history:
            self._history = self._history[-self._max_history:]

        all_handlers = list(self._global_handlers) + list(self._handlers.get(event.event_type, []))

        for handler in all_handlers:
            try:
                handler(event)
            except Exception as e:
                logger.warning(
                    "Event handler %s failed for %s: %s",
                    getattr(handler, '__name__', handler), event.event_type, e,
                )

    def recent_events(self, limit: int = 50) -> list[Event]:
        """Return recent events."""
        return self._history[-limit:]

    def clear(self) -> None:
        """Clear all handlers and history."""
        self._handlers.clear()
        self._global_handlers.clear()
        self._history.clear()
