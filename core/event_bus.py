"""Simple in-process event bus for decoupled delivery notifications."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

EventHandler = Callable[[Any], None]

logger = logging.getLogger("learnos.event_bus")


class EventBus:
    """Dispatches notifications to subscribers by topic name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Register a callback for a topic."""
        self._handlers[topic].append(handler)

    def emit(self, topic: str, payload: Any) -> None:
        """Notify all subscribers. A failing subscriber never reaches the emitter."""
        for handler in self._handlers.get(topic, []):
            try:
                handler(payload)
            except Exception as exc:
                logger.warning("Subscriber for '%s' failed: %s", topic, exc)
