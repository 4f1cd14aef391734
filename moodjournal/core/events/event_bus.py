"""Simple in-process event bus."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from moodjournal.core.events.event_models import EventRecord

EventHandler = Callable[[EventRecord], None]

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self) -> None:
        self._subscribers: Dict[str, List[EventHandler]] = {}

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._subscribers.setdefault(event_type, [])
        # create_app may run many times per process (tests); keep one registration.
        if handler not in handlers:
            handlers.append(handler)

    def publish(self, event: EventRecord) -> None:
        handlers = self._subscribers.get(event.event_type, [])
        logger.debug("Publishing %s to %d handler(s)", event.event_type, len(handlers))
        for handler in handlers:
            handler(event)

    def emit(self, event_type: str, payload: dict, user_id: int | None = None) -> EventRecord:
        event = EventRecord(event_type=event_type, payload=payload, user_id=user_id)
        self.publish(event)
        return event


# Global singleton
event_bus = EventBus()
