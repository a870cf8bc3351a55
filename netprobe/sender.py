"""Send numbered packets at a fixed rate."""

from __future__ import annotations

import socket
import sys
import time
from typing import TextIO

from .config import Config, Proto
from .stats import SendStats

_SEQ_BYTES = 8


def encode_packet(seq: int, size: int) -> bytes:
    """Build a packet of ``size`` bytes of 'A' led by the 64-bit sequence number."""
    if size < 0:
        raise ValueError("packet size must not be negative")
    header = (seq % (1 << 64)).to_bytes(_SEQ_BYTES, "little")
    if size <= _SEQ_BYTES:
        return header[:size]
    return header + b"A" * (size - _SEQ_BYTES)


def send_delay(config: Config) -> float:
    """Seconds a packet takes at the configured byte rate; 0 when unlimited."""
    if config.pkt_rate > 0:
        return config.pkt_size / config.pkt_rate
    return 0.0


def run_send(config: Config, out: TextIO | None = None) -> int:
    """Send packets to the remote host; return how many were sent."""
    out = sys.stdout if out is None else out
    for line in config.summary_lines():
        print(line, file=out)

    tcp = config.proto is Proto.TCP
    target = (config.rhost, config.rport)
    delay = send_delay(config)
    # The pause is the delay value taken as milliseconds and slept as microseconds.
    pause = int(delay * 1000) / 1_000_000

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM if tcp else socket.SOCK_DGRAM) as sock:
        if tcp:
            try:
                sock.connect(target)
            except OSError as exc:
                raise ConnectionError("connect failed") from exc

        stats = SendStats(config.pkt_size, config.stat, time.monotonic())
        seq = 0
        while True:
            packet = encode_packet(seq, config.pkt_size)
            try:
                sent = sock.send(packet) if tcp else sock.sendto(packet, target)
            except OSError as exc:
                print(f"send failed: {exc}", file=sys.stderr)
                break
            if sent == 0:
                print("Connection closed", file=out)
                break

            seq += 1
            report = stats.record_packet(time.monotonic())
            if report:
                print(report, file=out)

            if config.pkt_num > 0 and stats.packet_count >= config.pkt_num:
                print(f"Sent {stats.packet_count} packets and exit", file=out)
                break

            if pause > 0:
                time.sleep(pause)

    return stats.packet_count