"""In-process domain events."""

from moodjournal.core.events.event_bus import EventBus, event_bus
from moodjournal.core.events.event_models import EventRecord

__all__ = ["EventBus", "EventRecord", "event_bus"]
