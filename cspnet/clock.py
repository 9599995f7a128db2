"""Monotonic uptime counters and access to the real-time clock."""

from __future__ import annotations

import errno
import time
from dataclasses import dataclass

_U32_MASK = 0xFFFFFFFF
_NS_PER_S = 1_000_000_000
_NS_PER_MS = 1_000_000


@dataclass(frozen=True)
class Timestamp:
    """A wall-clock time as whole seconds plus nanoseconds."""

    tv_sec: int = 0
    tv_nsec: int = 0


def get_ms() -> int:
    """Return monotonic milliseconds, wrapped to 32 bits."""
    return (time.monotonic_ns() // _NS_PER_MS) & _U32_MASK


def get_ms_isr() -> int:
    """Return monotonic milliseconds; safe to call from any context."""
    return get_ms()


def get_s() -> int:
    """Return monotonic seconds, wrapped to 32 bits."""
    return (time.monotonic_ns() // _NS_PER_S) & _U32_MASK


def get_s_isr() -> int:
    """Return monotonic seconds; safe to call from any context."""
    return get_s()


def clock_get_time() -> Timestamp:
    """Return the current real-time clock value."""
    sec, nsec = divmod(time.time_ns(), _NS_PER_S)
    return Timestamp(tv_sec=sec & _U32_MASK, tv_nsec=nsec)


def clock_set_time(timestamp: Timestamp) -> None:
    """Set the real-time clock.

    Raises OSError when the platform refuses or does not support it.
    """
    settime = getattr(time, "clock_settime_ns", None)
    clock_id = getattr(time, "CLOCK_REALTIME", None)
    if settime is None or clock_id is None:
        raise OSError(errno.ENOSYS, "setting the real-time clock is not supported")
    settime(clock_id, timestamp.tv_sec * _NS_PER_S + timestamp.tv_nsec)