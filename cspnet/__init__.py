"""CubeSat Space Protocol parts: headers, CRC32, SHA-1/HMAC, queues, clocks, hex dumps and a ZeroMQ hub."""

__version__ = "0.1.0"