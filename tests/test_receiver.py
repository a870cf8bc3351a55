import io
import socket
import threading
import time

from netprobe.config import Config, Mode, Proto
from netprobe.receiver import decode_sequence, run_recv
from netprobe.sender import encode_packet


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def _connect(port, deadline=5.0):
    end = time.monotonic() + deadline
    while True:
        try:
            return socket.create_connection(("127.0.0.1", port), timeout=1)
        except OSError:
            if time.monotonic() > end:
                raise
            time.sleep(0.05)


def test_decode_round_trip():
    for seq in [0, 1, 255, 2**40 + 3]:
        assert decode_sequence(encode_packet(seq, 32)) == seq


def test_decode_little_endian():
    assert decode_sequence(b"\x01\x02" + b"\0" * 6) == 0x0201


def test_decode_short_packet_pads_with_zeros():
    assert decode_sequence(b"\x07") == 7
    assert decode_sequence(b"") == 0


def test_run_recv_tcp_counts_packets():
    port = _free_port()
    config = Config(mode=Mode.RECV, proto=Proto.TCP, lport=port, pkt_size=16, stat=100_000)
    out = io.StringIO()

    def client():
        with _connect(port) as conn:
            for seq in range(3):
                conn.sendall(encode_packet(seq, 16))

    sender = threading.Thread(target=client, daemon=True)
    sender.start()
    stats = run_recv(config, out)
    sender.join(timeout=5)

    assert stats.packet_count == 3
    assert stats.lost_packets == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "Mode             : Recv"
    assert any(line.startswith("Accepted connection from 127.0.0.1:") for line in lines)
    assert lines[-1] == "Connection closed"