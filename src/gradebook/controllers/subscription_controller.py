# File: src/gradebook/controllers/subscription_controller.py

import asyncio
import logging
from typing import Any, Callable, Optional

from ..schemas.events import Event, EventKind
from ..utils.pubsub import EventBus

logger = logging.getLogger(__name__)

_CLOSED = object()


class EventChannel:
    """
    Private, unbounded queue of matching events for one subscriber.

    The listener is registered on the bus as soon as the channel is built, so
    nothing published afterwards is missed. Iterating waits for the next item
    and never ends on its own; close() unregisters the listener and wakes a
    waiting consumer, which then stops. Use it as a context manager so the
    listener is removed on every exit path.

    The queue binds to whichever event loop first waits on it, so a channel may
    be built before that loop is running.
    """

    def __init__(
        self,
        bus: EventBus,
        kind: EventKind,
        matches: Callable[[Event], bool],
        project: Optional[Callable[[Event], Any]] = None,
    ):
        self.kind = kind
        self._matches = matches
        self._project = project or (lambda event: event)
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False
        self._unsubscribe = bus.subscribe(kind, self._deliver)

    def _deliver(self, event: Event) -> None:
        if self._matches(event):
            self._queue.put_nowait(self._project(event))

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        return 0 if self._closed else self._queue.qsize()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._unsubscribe()
        self._queue.put_nowait(_CLOSED)
        logger.debug(f"Closed {self.kind.value} channel")

    def __enter__(self) -> "EventChannel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __aiter__(self) -> "EventChannel":
        return self

    async def __anext__(self) -> Any:
        if self._closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        return item


def assignment_updates(bus: EventBus, teacher_id: str) -> EventChannel:
    """Assignments created, updated or published by `teacher_id`."""
    return EventChannel(
        bus,
        EventKind.ASSIGNMENT_UPDATED,
        matches=lambda event: event.assignment.teacher_id == teacher_id,
        project=lambda event: event.assignment,
    )


def submissions_created(bus: EventBus, assignment_id: str) -> EventChannel:
    """New submissions to `assignment_id`."""
    return EventChannel(
        bus,
        EventKind.SUBMISSION_CREATED,
        matches=lambda event: event.submission.assignment_id == assignment_id,
        project=lambda event: event.submission,
    )


def submissions_graded(bus: EventBus, student_id: str) -> EventChannel:
    """Grades given to `student_id`'s submissions."""
    return EventChannel(
        bus,
        EventKind.SUBMISSION_GRADED,
        matches=lambda event: event.submission.student_id == student_id,
        project=lambda event: event.submission,
    )
