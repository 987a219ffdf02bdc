"""In-process event bus and topic names."""

from statly.events.bus import Event, EventBus, Subscription

__all__ = ["Event", "EventBus", "Subscription"]
