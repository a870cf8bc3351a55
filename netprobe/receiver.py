"""Receive packets and report loss and jitter."""

from __future__ import annotations

import socket
import sys
import time
from typing import TextIO

from .config import Config, Proto
from .stats import ReceiveStats

_SEQ_BYTES = 8


def decode_sequence(data: bytes) -> int:
    """Read the 64-bit sequence number at the start of a packet."""
    return int.from_bytes(data[:_SEQ_BYTES].ljust(_SEQ_BYTES, b"\0"), "little")


def _receive_loop(sock: socket.socket, config: Config, out: TextIO) -> ReceiveStats:
    stats = ReceiveStats(config.stat, time.monotonic())
    while True:
        try:
            data = sock.recv(config.pkt_size)
        except OSError as exc:
            print(f"recv failed: {exc}", file=sys.stderr)
            break
        if not data:
            print("Connection closed", file=out)
            break
        report = stats.record_packet(decode_sequence(data), time.monotonic())
        if report:
            print(report, file=out)
    return stats


def run_recv(config: Config, out: TextIO | None = None) -> ReceiveStats:
    """Listen on the local port and receive until the peer stops."""
    out = sys.stdout if out is None else out
    for line in config.summary_lines():
        print(line, file=out)

    tcp = config.proto is Proto.TCP
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM if tcp else socket.SOCK_DGRAM) as sock:
        sock.bind(("", config.lport))
        if not tcp:
            return _receive_loop(sock, config, out)
        sock.listen(5)
        try:
            conn, peer = sock.accept()
        except OSError as exc:
            raise ConnectionError("accept failed") from exc
        print(f"Accepted connection from {peer[0]}:{peer[1]}", file=out)
        with conn:
            return _receive_loop(conn, config, out)