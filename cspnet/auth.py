"""HMAC-SHA1 message authentication for packets."""

from __future__ import annotations

import hmac

from .packet import CspError, Packet, encode_header
from .sha1 import BLOCK_SIZE, Sha1, sha1_memory

HMAC_LENGTH = 4
KEY_LENGTH = 16


def hmac_memory(key: bytes, data: bytes | bytearray | memoryview) -> bytes:
    """Return the full HMAC-SHA1 of ``data`` under ``key``."""
    key = bytes(key)
    if not key:
        raise ValueError("HMAC key must not be empty")
    if len(key) > BLOCK_SIZE:
        key = sha1_memory(key)
    key = key.ljust(BLOCK_SIZE, b"\x00")
    inner = Sha1().update(bytes(b ^ 0x36 for b in key)).update(data).digest()
    return Sha1().update(bytes(b ^ 0x5C for b in key)).update(inner).digest()


class HmacAuthenticator:
    """Appends and checks truncated HMAC trailers with a key derived by SHA-1."""

    def __init__(self, key: bytes) -> None:
        self._key = sha1_memory(key)[:KEY_LENGTH]

    def _tag(self, packet: Packet, payload: bytes, include_header: bool, version: int) -> bytes:
        message = encode_header(packet.id, version) + payload if include_header else payload
        return hmac_memory(self._key, message)[:HMAC_LENGTH]

    def append(self, packet: Packet, include_header: bool = True, version: int = 2) -> None:
        """Append an HMAC trailer to the packet payload."""
        packet.data += self._tag(packet, bytes(packet.data), include_header, version)

    def verify(self, packet: Packet, include_header: bool = True, version: int = 2) -> None:
        """Check and strip the HMAC trailer; raises CspError on mismatch."""
        if packet.length < HMAC_LENGTH:
            raise CspError("packet too short to hold an HMAC trailer")
        body = bytes(packet.data[:-HMAC_LENGTH])
        received = bytes(packet.data[-HMAC_LENGTH:])
        if not hmac.compare_digest(received, self._tag(packet, body, include_header, version)):
            raise CspError("HMAC mismatch")
        del packet.data[-HMAC_LENGTH:]