"""CRC-32C (Castagnoli) checksums and packet checksum trailers."""

from __future__ import annotations

from .packet import CspError, Packet, encode_header

CRC32_LENGTH = 4

_POLY = 0x82F63B78
_MASK = 0xFFFFFFFF


def _make_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


class Crc32:
    """Incremental CRC-32C calculation."""

    def __init__(self) -> None:
        self._crc = _MASK

    def update(self, data: bytes | bytearray | memoryview) -> "Crc32":
        """Feed more bytes into the checksum."""
        crc = self._crc
        for byte in bytes(data):
            crc = _TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
        self._crc = crc
        return self

    def final(self) -> int:
        """Return the checksum of everything fed so far."""
        return self._crc ^ _MASK


def crc32_memory(data: bytes | bytearray | memoryview) -> int:
    """Return the CRC-32C of a block of bytes."""
    return Crc32().update(data).final()


def _checksum_bytes(data: bytes) -> bytes:
    return crc32_memory(data).to_bytes(CRC32_LENGTH, "big")


def crc32_append(packet: Packet, include_header: bool = True, version: int = 2) -> None:
    """Append a big-endian CRC-32C trailer to the packet payload.

    With ``include_header`` the checksum covers the header and the payload,
    otherwise the payload alone.
    """
    payload = bytes(packet.data)
    covered = encode_header(packet.id, version) + payload if include_header else payload
    packet.data += _checksum_bytes(covered)


def crc32_verify(packet: Packet, version: int = 2) -> None:
    """Check and strip the CRC-32C trailer of a packet.

    A checksum over header and payload is accepted, and so is one over the
    payload alone. Raises CspError when neither matches.
    """
    if packet.length < CRC32_LENGTH:
        raise CspError("packet too short to hold a CRC32 trailer")
    body = bytes(packet.data[:-CRC32_LENGTH])
    trailer = bytes(packet.data[-CRC32_LENGTH:])
    with_header = encode_header(packet.id, version) + body
    if trailer != _checksum_bytes(with_header) and trailer != _checksum_bytes(body):
        raise CspError("CRC32 mismatch")
    del packet.data[-CRC32_LENGTH:]