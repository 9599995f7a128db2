import io
import threading
import time

import pytest
import zmq

from cspnet.packet import CspError, Packet, PacketId
from cspnet.zmqproxy import (
    DELIMITER,
    capture,
    describe_frame,
    log_frame,
    main,
    parse_args,
)


def test_parse_args_defaults():
    options = parse_args([])
    assert options.version == 2
    assert options.sub_endpoint == "tcp://0.0.0.0:6000"
    assert options.pub_endpoint == "tcp://0.0.0.0:7000"
    assert options.logfile is None
    assert options.debug is False


def test_parse_args_all_options():
    options = parse_args(
        ["-d", "-v", "1", "-s", "tcp://a:1", "-p", "tcp://b:2", "-f", "log.bin"]
    )
    assert options.debug is True
    assert options.version == 1
    assert options.sub_endpoint == "tcp://a:1"
    assert options.pub_endpoint == "tcp://b:2"
    assert options.logfile == "log.bin"


@pytest.mark.parametrize("argv", [["-h"], ["-x"], ["-v"]])
def test_parse_args_rejects(argv, capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["-x"])
    assert info.value.code == 1


@pytest.mark.parametrize("version", [1, 2])
def test_describe_frame(version):
    packet = Packet(
        id=PacketId(pri=2, src=3, dst=4, dport=5, sport=6, flags=1),
        data=b"abc",
    )
    text = describe_frame(packet.frame(version), version)
    assert text == "Packet: Src 3, Dst 4, Dport 5, Sport 6, Pri 2, Flags 0x01, Size 3"


def test_describe_frame_too_short():
    with pytest.raises(CspError):
        describe_frame(b"\x00\x01\x02\x03", 1)


def test_log_frame_writes_delimiter_and_frame():
    log = io.BytesIO()
    log_frame(log, b"\x01\x02\x03")
    log_frame(log, b"\x04")
    assert log.getvalue() == DELIMITER + b"\x01\x02\x03" + DELIMITER + b"\x04"


def test_capture_logs_published_frames(capsys):
    context = zmq.Context()
    publisher = context.socket(zmq.PUB)
    endpoint = "inproc://capture-test"
    publisher.bind(endpoint)
    log = io.BytesIO()
    worker = threading.Thread(target=capture, args=(context, endpoint, log, 2))
    worker.start()

    frame = Packet(id=PacketId(src=7, dst=9, dport=10), data=b"hello").frame(2)
    deadline = time.monotonic() + 5
    while frame not in log.getvalue() and time.monotonic() < deadline:
        publisher.send(frame)
        time.sleep(0.05)

    publisher.close(linger=0)
    context.term()
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert log.getvalue().startswith(DELIMITER + frame)
    assert "Packet: Src 7, Dst 9, Dport 10" in capsys.readouterr().out