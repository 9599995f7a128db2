"""A binary semaphore with millisecond timeouts."""

from __future__ import annotations

import threading


def _seconds(timeout_ms: int | None) -> float | None:
    if timeout_ms is None:
        return None
    if timeout_ms < 0:
        raise ValueError("timeout must not be negative")
    return timeout_ms / 1000.0


class BinarySemaphore:
    """Semaphore whose count is either 0 or 1; it starts available."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._available = True

    def wait(self, timeout: int | None = None) -> bool:
        """Take the semaphore, waiting up to ``timeout`` ms.

        Returns True when taken, False on timeout. ``None`` waits forever.
        """
        wait = _seconds(timeout)
        with self._cond:
            if not self._cond.wait_for(lambda: self._available, wait):
                return False
            self._available = False
            return True

    def post(self) -> None:
        """Release the semaphore; releasing an available one has no effect."""
        with self._cond:
            if not self._available:
                self._available = True
                self._cond.notify()