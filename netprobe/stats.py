"""Running throughput, loss and jitter statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def _elapsed_ms(start: float, now: float) -> int:
    return int((now - start) * 1000)


@dataclass
class SendStats:
    """Counts sent packets and produces periodic throughput reports.

    Times are in seconds; ``stat_ms`` is the report interval.
    """

    pkt_size: int
    stat_ms: int
    start: float
    packet_count: int = 0
    total_elapsed_ms: int = 0

    def record_packet(self, now: float) -> str | None:
        """Count one packet sent at ``now``; return a report line when one is due."""
        self.packet_count += 1
        elapsed = _elapsed_ms(self.start, now)
        if elapsed < self.stat_ms:
            return None
        self.total_elapsed_ms += elapsed
        denominator = self.total_elapsed_ms * 1000
        rate = (
            self.packet_count * self.pkt_size * 8.0 / denominator
            if denominator
            else math.inf
        )
        self.start = now
        return (
            f"Elapsed [{self.total_elapsed_ms} ms] Pkts [{self.packet_count}] "
            f"Rate [{rate:.2f} Mbps]"
        )


@dataclass
class ReceiveStats:
    """Counts received packets, lost sequence numbers and arrival jitter."""

    stat_ms: int
    start: float
    last_recv: float | None = None
    packet_count: int = 0
    lost_packets: int = 0
    seq_num: int = 0
    total_jitter: float = 0.0
    total_intervals: int = 0
    total_elapsed_ms: int = field(default=0)

    def __post_init__(self) -> None:
        if self.last_recv is None:
            self.last_recv = self.start

    def record_packet(self, seq: int, now: float) -> str | None:
        """Count a packet with sequence number ``seq`` received at ``now``."""
        self.packet_count += 1
        if self.packet_count > 1:
            interval = (now - self.last_recv) * 1000
            mean = self.total_jitter / (self.total_intervals or 1)
            self.total_jitter += abs(interval - mean)
            self.total_intervals += 1
        self.last_recv = now

        if seq > self.seq_num:
            self.lost_packets += seq - self.seq_num - 1
            self.seq_num = seq
        else:
            self.seq_num += 1

        elapsed = _elapsed_ms(self.start, now)
        if elapsed < self.stat_ms:
            return None
        self.total_elapsed_ms += elapsed
        self.start = now
        return (
            f"Elapsed [{self.total_elapsed_ms} ms] Pkts [{self.packet_count}] "
            f"Lost [{self.lost_packets}, {self.loss_rate():.2f}%] "
            f"Jitter [{self.average_jitter():.2f} ms]"
        )

    def loss_rate(self) -> float:
        """Lost packets as a percentage of all packets expected."""
        total = self.packet_count + self.lost_packets
        return self.lost_packets / total * 100.0 if total else 0.0

    def average_jitter(self) -> float:
        """Mean jitter in milliseconds."""
        return self.total_jitter / self.total_intervals if self.total_intervals else 0.0