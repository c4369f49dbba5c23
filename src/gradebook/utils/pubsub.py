# File: src/gradebook/utils/pubsub.py
import logging
from typing import Callable, Dict

from src.gradebook.schemas.events import Event, EventKind

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]
Unsubscribe = Callable[[], None]


class EventBus:
    """
    In-process publish/subscribe keyed by event kind.

    publish() runs synchronously on the caller: every listener registered for
    the event's kind is called in registration order. A listener that raises
    stops the fan-out and the exception reaches the publisher.
    """

    def __init__(self):
        self._listeners: Dict[EventKind, Dict[object, Listener]] = {}

    def subscribe(self, kind: EventKind, listener: Listener) -> Unsubscribe:
        token = object()
        self._listeners.setdefault(kind, {})[token] = listener
        logger.debug(f"Listener registered on {kind.value}")

        def unsubscribe() -> None:
            # Removes only this registration; safe to call more than once.
            listeners = self._listeners.get(kind)
            if listeners is not None and listeners.pop(token, None) is not None:
                logger.debug(f"Listener removed from {kind.value}")

        return unsubscribe

    def publish(self, event: Event) -> None:
        listeners = list(self._listeners.get(event.kind, {}).values())
        logger.debug(f"Publishing {event.kind.value} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(event)

    def listener_count(self, kind: EventKind) -> int:
        return len(self._listeners.get(kind, {}))
