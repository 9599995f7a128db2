"""Hex dumps of byte buffers, sixteen bytes per line with an ASCII column."""

from __future__ import annotations

_BYTES_PER_LINE = 16


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def hex_dump_format(
    desc: str | None,
    data: bytes | bytearray | memoryview,
    fmt: int = 0,
) -> str:
    """Return a hex dump of ``data``.

    The description, when given, comes first on a line of its own. When bit 0
    of ``fmt`` is set each line starts with the offset of its first byte;
    otherwise the offset column is left blank.
    """
    raw = bytes(data)
    out: list[str] = []
    if desc is not None:
        out.append(f"{desc}\n")
    if not raw:
        return "".join(out)

    for start in range(0, len(raw), _BYTES_PER_LINE):
        chunk = raw[start:start + _BYTES_PER_LINE]
        prefix = f"  {start:08x} " if fmt & 0x1 else "        "
        hex_part = "".join(f" {byte:02x}" for byte in chunk)
        padding = "   " * (_BYTES_PER_LINE - len(chunk))
        ascii_part = "".join(_printable(byte) for byte in chunk)
        out.append(f"{prefix}{hex_part}{padding}  {ascii_part}\n")
    return "".join(out)


def hex_dump(desc: str | None, data: bytes | bytearray | memoryview) -> str:
    """Return a hex dump of ``data`` without offsets."""
    return hex_dump_format(desc, data, 0)