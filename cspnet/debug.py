"""Diagnostic counters and error codes recorded by the networking core."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any

_U8_MASK = 0xFF


class DebugError(IntEnum):
    """The most recent internal error noticed by the core."""

    NONE = 0
    CORRUPT_BUFFER = 1
    ALREADY_CLOSED = 2
    ALREADY_FREE = 3
    REFCOUNT = 4
    INVALID_POINTER = 5
    UNSUPPORTED = 6


@dataclass
class DebugCounters:
    """Eight-bit event counters plus the last recorded error.

    Counters wrap around at 256, like the hardware-sized counters they mirror.
    """

    buffer_out: int = 0
    errno: DebugError = DebugError.NONE
    conn_out: int = 0
    conn_ovf: int = 0
    conn_noroute: int = 0
    can_errno: int = 0
    eth_errno: int = 0
    inval_reply: int = 0
    rdp_print: int = 0
    packet_print: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "errno":
            value = DebugError(value)
        elif isinstance(value, int):
            value &= _U8_MASK
        object.__setattr__(self, name, value)

    def reset(self) -> None:
        """Set every counter back to zero and clear the error."""
        for f in fields(self):
            setattr(self, f.name, f.default)