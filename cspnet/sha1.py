"""SHA-1 message digest."""

from __future__ import annotations

import struct

BLOCK_SIZE = 64
DIGEST_SIZE = 20

_MASK = 0xFFFFFFFF
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rol(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        w.append(_rol(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i, word in enumerate(w):
        if i < 20:
            f, k = d ^ (b & (c ^ d)), 0x5A827999
        elif i < 40:
            f, k = b ^ c ^ d, 0x6ED9EBA1
        elif i < 60:
            f, k = (b & c) | (d & (b | c)), 0x8F1BBCDC
        else:
            f, k = b ^ c ^ d, 0xCA62C1D6
        temp = (_rol(a, 5) + f + e + k + word) & _MASK
        a, b, c, d, e = temp, a, _rol(b, 30), c, d

    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d, e)))


class Sha1:
    """Incremental SHA-1 calculation."""

    def __init__(self) -> None:
        self._state = _INITIAL
        self._pending = bytearray()
        self._compressed = 0

    def update(self, data: bytes | bytearray | memoryview) -> "Sha1":
        """Feed more bytes into the digest."""
        self._pending += data
        whole = len(self._pending) - len(self._pending) % BLOCK_SIZE
        for offset in range(0, whole, BLOCK_SIZE):
            self._state = _compress(
                self._state, bytes(self._pending[offset:offset + BLOCK_SIZE])
            )
        del self._pending[:whole]
        self._compressed += whole
        return self

    def digest(self) -> bytes:
        """Return the digest of everything fed so far."""
        bit_length = ((self._compressed + len(self._pending)) * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._pending) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += bit_length.to_bytes(8, "big")
        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + BLOCK_SIZE])
        return b"".join(word.to_bytes(4, "big") for word in state)


def sha1_memory(data: bytes | bytearray | memoryview) -> bytes:
    """Return the SHA-1 digest of a block of bytes."""
    return Sha1().update(data).digest()