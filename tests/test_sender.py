import io
import socket
import struct

import pytest

from netprobe.config import Config, Proto
from netprobe.sender import encode_packet, run_send, send_delay


def test_encode_packet_layout():
    assert encode_packet(1, 16) == struct.pack("<Q", 1) + b"A" * 8


def test_encode_packet_length_matches_size():
    assert len(encode_packet(123, 1000)) == 1000


def test_encode_packet_shorter_than_header():
    assert encode_packet(0x0102, 2) == b"\x02\x01"
    assert encode_packet(5, 0) == b""


def test_encode_packet_wraps_sequence():
    assert encode_packet(1 << 64, 8) == encode_packet(0, 8)


def test_encode_packet_negative_size():
    with pytest.raises(ValueError):
        encode_packet(0, -1)


def test_send_delay():
    assert send_delay(Config(pkt_size=1000, pkt_rate=1000)) == 1.0
    assert send_delay(Config(pkt_size=1000, pkt_rate=0)) == 0.0
    assert send_delay(Config(pkt_size=500, pkt_rate=-3)) == 0.0


def test_run_send_udp_delivers_numbered_packets():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.settimeout(5)
        port = listener.getsockname()[1]
        config = Config(rport=port, pkt_size=16, pkt_rate=0, pkt_num=3, stat=100_000)
        out = io.StringIO()

        assert run_send(config, out) == 3

        seqs = [struct.unpack("<Q", listener.recv(64)[:8])[0] for _ in range(3)]
    assert seqs == [0, 1, 2]
    lines = out.getvalue().splitlines()
    assert lines[0] == "Mode             : Send"
    assert lines[-1] == "Sent 3 packets and exit"


def test_run_send_tcp_connect_failure():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    config = Config(proto=Proto.TCP, rport=port, pkt_num=1)
    with pytest.raises(ConnectionError, match="connect failed"):
        run_send(config, io.StringIO())


def test_run_send_zero_size_reports_closed():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as listener:
        listener.bind(("127.0.0.1", 0))
        port = listener.getsockname()[1]
        out = io.StringIO()
        assert run_send(Config(rport=port, pkt_size=0, pkt_rate=0), out) == 0
    assert out.getvalue().splitlines()[-1] == "Connection closed"