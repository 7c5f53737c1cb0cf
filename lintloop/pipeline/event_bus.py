"""Bounded channel carrying ProgressEvents from workers to the dashboard."""

from __future__ import annotations

import asyncio
import logging

from lintloop.constants.limits import EVENT_QUEUE_CAPACITY
from lintloop.errors import EventBusClosedError
from lintloop.models.events import ProgressEvent

logger = logging.getLogger(__name__)

# Queued after the last event so a pending receive() wakes up on close.
_CLOSE_MARKER = None


class EventBus:
    """Many-producer / single-consumer queue with an explicit close.

    ``send`` waits while the queue is full. ``receive`` returns ``None`` once
    the bus is closed and every event queued before the close was delivered.
    """

    def __init__(self, capacity: int = EVENT_QUEUE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._queue: asyncio.Queue[ProgressEvent | None] = asyncio.Queue(maxsize=capacity)
        self._closed = False
        self._drained = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def qsize(self) -> int:
        return self._queue.qsize()

    async def send(self, event: ProgressEvent) -> None:
        if self._closed:
            raise EventBusClosedError(f"event bus closed; dropped event for {event.path}")
        await self._queue.put(event)

    def close(self) -> None:
        """Close the bus. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Event bus closed with %d queued events", self._queue.qsize())
        try:
            self._queue.put_nowait(_CLOSE_MARKER)
        except asyncio.QueueFull:
            # The consumer sees the flag once it empties the queue.
            pass

    async def receive(self) -> ProgressEvent | None:
        if self._drained:
            return None
        if self._closed and self._queue.empty():
            self._drained = True
            return None
        event = await self._queue.get()
        if event is _CLOSE_MARKER:
            self._drained = True
            return None
        return event


__all__ = ["EventBus"]
