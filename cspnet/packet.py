"""CSP packet identifiers and the version 1 and 2 header formats."""

from __future__ import annotations

from dataclasses import dataclass, field, fields


class CspError(Exception):
    """Raised when a CSP frame or packet cannot be processed."""


@dataclass(frozen=True)
class _Layout:
    header_size: int
    host_bits: int
    port_bits: int
    fields: tuple[tuple[str, int, int], ...]


# Field name, bit offset, mask.
_V1 = _Layout(
    header_size=4,
    host_bits=5,
    port_bits=6,
    fields=(
        ("pri", 30, 0x3),
        ("src", 25, 0x1F),
        ("dst", 20, 0x1F),
        ("dport", 14, 0x3F),
        ("sport", 8, 0x3F),
        ("flags", 0, 0xFF),
    ),
)

_V2 = _Layout(
    header_size=6,
    host_bits=14,
    port_bits=6,
    fields=(
        ("pri", 46, 0x3),
        ("dst", 32, 0x3FFF),
        ("src", 18, 0x3FFF),
        ("dport", 12, 0x3F),
        ("sport", 6, 0x3F),
        ("flags", 0, 0x3F),
    ),
)


def _layout(version: int) -> _Layout:
    return _V2 if version == 2 else _V1


@dataclass
class PacketId:
    """Addressing and flags carried in a packet header."""

    pri: int = 0
    dst: int = 0
    src: int = 0
    dport: int = 0
    sport: int = 0
    flags: int = 0

    def clear(self) -> None:
        """Reset every field to zero."""
        for f in fields(self):
            setattr(self, f.name, 0)


@dataclass
class Packet:
    """A packet: identifier plus payload."""

    id: PacketId = field(default_factory=PacketId)
    data: bytearray = field(default_factory=bytearray)
    timestamp_rx: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)

    @property
    def length(self) -> int:
        """Payload length in bytes."""
        return len(self.data)

    def frame(self, version: int = 2) -> bytes:
        """Return the header followed by the payload."""
        return encode_header(self.id, version) + bytes(self.data)

    @classmethod
    def from_frame(cls, frame: bytes, version: int = 2) -> "Packet":
        """Parse a received frame into a packet."""
        packet_id = decode_header(frame, version)
        return cls(
            id=packet_id,
            data=bytearray(frame[header_size(version):]),
            timestamp_rx=0,
        )


def header_size(version: int = 2) -> int:
    """Return the header size in bytes."""
    return _layout(version).header_size


def encode_header(packet_id: PacketId, version: int = 2) -> bytes:
    """Pack an identifier into a big-endian header."""
    layout = _layout(version)
    value = 0
    for name, offset, mask in layout.fields:
        value |= (getattr(packet_id, name) & mask) << offset
    return value.to_bytes(layout.header_size, "big")


def decode_header(frame: bytes, version: int = 2) -> PacketId:
    """Unpack the header at the start of a frame."""
    layout = _layout(version)
    if len(frame) < layout.header_size:
        raise CspError(
            f"frame of {len(frame)} bytes is shorter than the "
            f"{layout.header_size}-byte header"
        )
    value = int.from_bytes(bytes(frame[: layout.header_size]), "big")
    return PacketId(
        **{name: (value >> offset) & mask for name, offset, mask in layout.fields}
    )


def host_bits(version: int = 2) -> int:
    """Return the number of bits in a node address."""
    return _layout(version).host_bits


def max_node_id(version: int = 2) -> int:
    """Return the largest node address, which is also the broadcast address."""
    return (1 << host_bits(version)) - 1


def max_port(version: int = 2) -> int:
    """Return the largest port number."""
    return (1 << _layout(version).port_bits) - 1


def is_broadcast(addr: int, iface_addr: int, netmask: int, version: int = 2) -> bool:
    """Tell whether ``addr`` is a broadcast address for the given interface."""
    bits = host_bits(version)
    hostmask = ((1 << (bits - netmask)) - 1) & 0xFFFF
    netbits = ((1 << bits) - 1 - hostmask) & 0xFFFF
    if (addr & hostmask) == hostmask and (addr & netbits) == (iface_addr & netbits):
        return True
    return addr == max_node_id(version)