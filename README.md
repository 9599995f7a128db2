# cspnet

Building blocks for the CubeSat Space Protocol (CSP) in pure Python.

## Modules

- `cspnet.packet`: `PacketId`, `Packet` and the CSP 1.x (32-bit) and 2.x (48-bit)
  header codecs: `encode_header`, `decode_header`, `header_size`, `host_bits`,
  `max_node_id`, `max_port` and `is_broadcast`. `Packet.frame(version)` returns the
  header followed by the payload; `Packet.from_frame(frame, version)` parses one.
  A frame shorter than the header raises `CspError`.
- `cspnet.crc32`: the CRC-32C (Castagnoli) checksum (`Crc32`, `crc32_memory`), and
  `crc32_append` / `crc32_verify`, which add and check-and-strip a 4-byte big-endian
  trailer on a packet. Verification accepts a checksum over header and payload or over
  the payload alone, and raises `CspError` when neither matches.
- `cspnet.sha1`: SHA-1 (`Sha1`, `sha1_memory`).
- `cspnet.auth`: `hmac_memory(key, data)` (HMAC-SHA1) and `HmacAuthenticator(key)`,
  whose `append` and `verify` add and check-and-strip a 4-byte HMAC trailer. The
  working key is the first 16 bytes of the SHA-1 of the key given.
- `cspnet.msgqueue`: `MessageQueue(length)`, a bounded thread-safe FIFO with
  millisecond timeouts (`None` waits forever, `0` does not wait). It raises
  `QueueFull` or `QueueEmpty` on timeout.
- `cspnet.semaphore`: `BinarySemaphore`, starting available; `wait(timeout)` returns
  `True` or `False`, and `post()` on an available semaphore has no effect.
- `cspnet.clock`: monotonic `get_ms`, `get_s` (and their `_isr` twins), wrapped to
  32 bits; `clock_get_time()` returns a `Timestamp`; `clock_set_time` sets the
  real-time clock or raises `OSError`.
- `cspnet.debug`: `DebugCounters`, eight-bit wrapping counters plus the last
  `DebugError`, with `reset()`.
- `cspnet.hexdump`: `hex_dump(desc, data)` and `hex_dump_format(desc, data, fmt)`
  return a dump of sixteen bytes per line with an ASCII column; bit 0 of `fmt` adds
  the offset of each line.

## Installing

```
pip install .
```

## Example

```python
from cspnet.packet import Packet, PacketId
from cspnet.crc32 import crc32_memory

packet = Packet(id=PacketId(pri=2, src=1, dst=5, dport=10, sport=20), data=b"hello")
frame = packet.frame(2)            # 6-byte CSP 2.x header followed by the payload
decoded = Packet.from_frame(frame, 2)
assert decoded.id.dst == 5 and decoded.data == b"hello"
print(hex(crc32_memory(frame)))
```

## ZeroMQ hub

`cspnet-zmqproxy` runs an XSUB/XPUB forwarder between CSP nodes that talk over
ZeroMQ. Each socket binds to its endpoint, or connects to it when binding fails.
A capture thread subscribes to the publisher endpoint and prints one line per frame
(source, destination, ports, priority, flags and payload size); frames shorter than
5 bytes are reported and skipped.

```
cspnet-zmqproxy -s tcp://0.0.0.0:6000 -p tcp://0.0.0.0:7000 -v 2 -f capture.log
```

Options:

- `-s ENDPOINT`: subscriber endpoint (default `tcp://0.0.0.0:6000`)
- `-p ENDPOINT`: publisher endpoint (default `tcp://0.0.0.0:7000`)
- `-v VERSION`: header version used to decode frames (2 selects 2.x, anything else
  1.x; default 2)
- `-f LOGFILE`: append a `--------` line and the raw bytes of every captured frame
- `-d`: sets the debug flag, which does not change the output

Any other option, `-h` included, prints the usage and exits with status 1.

## What it does not do

This package is a set of parts, not a network stack. It has no router, no
connection table or sockets, no packet buffer pool, no duplicate-packet filter, no
reliable transport, and no CAN, serial or ZeroMQ interface drivers for a node. The
hub above only forwards and prints frames; it does not answer pings or other
service requests.

## Tests

```
pip install .[test]
pytest
```