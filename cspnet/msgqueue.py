"""A bounded, thread-safe FIFO with millisecond timeouts."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Any


class QueueFull(queue.Full):
    """Raised when an item could not be enqueued before the timeout."""


class QueueEmpty(queue.Empty):
    """Raised when no item became available before the timeout."""


def _seconds(timeout_ms: int | None) -> float | None:
    if timeout_ms is None:
        return None
    if timeout_ms < 0:
        raise ValueError("timeout must not be negative")
    return timeout_ms / 1000.0


class MessageQueue:
    """Fixed-capacity FIFO queue.

    Timeouts are in milliseconds; ``None`` waits forever and ``0`` does not wait.
    """

    def __init__(self, length: int) -> None:
        if length < 1:
            raise ValueError("queue length must be at least 1")
        self._length = length
        self._items: deque[Any] = deque()
        lock = threading.Lock()
        self._not_full = threading.Condition(lock)
        self._not_empty = threading.Condition(lock)

    @property
    def length(self) -> int:
        """The capacity of the queue."""
        return self._length

    def put(self, item: Any, timeout: int | None = None) -> None:
        """Append an item, waiting up to ``timeout`` ms for a free slot."""
        wait = _seconds(timeout)
        with self._not_full:
            if not self._not_full.wait_for(
                lambda: len(self._items) < self._length, wait
            ):
                raise QueueFull("queue is full")
            self._items.append(item)
            self._not_empty.notify_all()

    def get(self, timeout: int | None = None) -> Any:
        """Remove and return the oldest item, waiting up to ``timeout`` ms."""
        wait = _seconds(timeout)
        with self._not_empty:
            if not self._not_empty.wait_for(lambda: bool(self._items), wait):
                raise QueueEmpty("queue is empty")
            item = self._items.popleft()
            self._not_full.notify_all()
            return item

    def put_nowait(self, item: Any) -> None:
        """Append an item without waiting."""
        self.put(item, 0)

    def get_nowait(self) -> Any:
        """Remove and return the oldest item without waiting."""
        return self.get(0)

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._items)

    def free(self) -> int:
        """Return the number of free slots."""
        with self._not_full:
            return self._length - len(self._items)

    def clear(self) -> None:
        """Discard every queued item."""
        with self._not_full:
            self._items.clear()
            self._not_full.notify_all()