"""A ZeroMQ forwarding hub for CSP frames with optional capture logging."""

from __future__ import annotations

import getopt
import threading
from dataclasses import dataclass
from typing import BinaryIO

import zmq

from .packet import CspError, decode_header, header_size

DEFAULT_SUB = "tcp://0.0.0.0:6000"
DEFAULT_PUB = "tcp://0.0.0.0:7000"
MIN_FRAME_LENGTH = 5
DELIMITER = b"--------\n"

USAGE = (
    "Usage:\n"
    " -d \t\tEnable debug\n"
    " -v VERSION\tcsp version\n"
    " -s SUB_STR\tsubscriber port: tcp://localhost:7000\n"
    " -p PUB_STR\tpublisher  port: tcp://localhost:6000\n"
    " -f LOGFILE\tLog to this file\n"
)


@dataclass
class ProxyOptions:
    """Command-line settings of the hub."""

    debug: bool = False
    version: int = 2
    sub_endpoint: str = DEFAULT_SUB
    pub_endpoint: str = DEFAULT_PUB
    logfile: str | None = None


def _atoi(text: str) -> int:
    digits = ""
    stripped = text.strip()
    sign = ""
    if stripped[:1] in "+-" and stripped:
        sign, stripped = stripped[0], stripped[1:]
    for ch in stripped:
        if not ch.isdigit():
            break
        digits += ch
    return int(sign + digits) if digits else 0


def parse_args(argv: list[str] | None) -> ProxyOptions:
    """Parse command-line arguments; prints usage and exits 1 on -h or errors."""
    options = ProxyOptions()
    try:
        opts, _ = getopt.getopt(list(argv or []), "dhv:s:p:f:")
    except getopt.GetoptError:
        print(USAGE, end="")
        raise SystemExit(1) from None
    for flag, value in opts:
        if flag == "-d":
            options.debug = True
        elif flag == "-v":
            options.version = _atoi(value)
        elif flag == "-s":
            options.sub_endpoint = value
        elif flag == "-p":
            options.pub_endpoint = value
        elif flag == "-f":
            options.logfile = value
        else:
            print(USAGE, end="")
            raise SystemExit(1)
    return options


def describe_frame(frame: bytes, version: int = 2) -> str:
    """Summarise the header of a raw frame in one line.

    Raises CspError when the frame is too short to hold a header.
    """
    if len(frame) < MIN_FRAME_LENGTH:
        raise CspError(f"Too short datalen: {len(frame)}")
    pid = decode_header(frame, version)
    size = len(frame) - header_size(version)
    return (
        f"Packet: Src {pid.src}, Dst {pid.dst}, Dport {pid.dport}, "
        f"Sport {pid.sport}, Pri {pid.pri}, Flags 0x{pid.flags:02X}, Size {size}"
    )


def log_frame(logfile: BinaryIO, frame: bytes) -> None:
    """Append a delimiter and the raw frame to a binary log file."""
    logfile.write(DELIMITER)
    logfile.write(bytes(frame))
    logfile.flush()


def capture(
    context: zmq.Context,
    pub_endpoint: str,
    logfile: BinaryIO | None = None,
    version: int = 2,
) -> None:
    """Print, and optionally log, every frame published by the hub.

    Runs until the context is terminated.
    """
    print(f"Capture/logging task listening on {pub_endpoint}")
    subscriber = context.socket(zmq.SUB)
    try:
        subscriber.connect(pub_endpoint)
        subscriber.setsockopt(zmq.SUBSCRIBE, b"")
        while True:
            try:
                frame = subscriber.recv()
            except zmq.ContextTerminated:
                return
            except zmq.ZMQError as exc:
                print(f"ZMQ: {exc}")
                continue

            if len(frame) < MIN_FRAME_LENGTH:
                print(f"ZMQ: Too short datalen: {len(frame)}")
                while True:
                    try:
                        subscriber.recv(zmq.NOBLOCK)
                    except zmq.Again:
                        break
                    except zmq.ContextTerminated:
                        return
                continue

            try:
                print(describe_frame(frame, version))
            except CspError as exc:
                print(f"ZMQ: {exc}")
                continue
            if logfile is not None:
                log_frame(logfile, frame)
    finally:
        subscriber.close(linger=0)


def _bind_or_connect(sock: zmq.Socket, endpoint: str) -> None:
    try:
        sock.bind(endpoint)
    except zmq.ZMQError:
        sock.connect(endpoint)


def main(argv: list[str] | None = None) -> int:
    """Run the hub: forward from subscribers to publishers and capture traffic."""
    options = parse_args(argv)

    logfile: BinaryIO | None = None
    if options.logfile:
        try:
            logfile = open(options.logfile, "ab")
        except OSError:
            print(f"Unable to open logfile {options.logfile}")
            return 255

    context = zmq.Context()
    try:
        frontend = context.socket(zmq.XSUB)
        _bind_or_connect(frontend, options.sub_endpoint)
        print(f"Subscriber task listening on {options.sub_endpoint}")

        backend = context.socket(zmq.XPUB)
        _bind_or_connect(backend, options.pub_endpoint)
        print(f"Publisher task listening on {options.pub_endpoint}")

        worker = threading.Thread(
            target=capture,
            args=(context, options.pub_endpoint, logfile, options.version),
            daemon=True,
        )
        worker.start()

        try:
            zmq.proxy(frontend, backend)
        except zmq.ContextTerminated:
            pass
        finally:
            frontend.close(linger=0)
            backend.close(linger=0)

        print("Closing ZMQproxy")
    finally:
        context.term()
        if logfile is not None:
            logfile.close()
    return 0