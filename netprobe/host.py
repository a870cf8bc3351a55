"""Resolve a host name and show what the resolver returns."""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass
from typing import TextIO

from .config import LOCAL_HOST, Config


@dataclass(frozen=True)
class HostInfo:
    """Result of looking up a host name."""

    query: str
    official_name: str
    address_type: int
    address_length: int
    addresses: tuple[str, ...]


def lookup_host(name: str) -> HostInfo:
    """Resolve ``name`` (the loopback address when empty) to IPv4 addresses."""
    query = name or LOCAL_HOST
    try:
        official, _aliases, addresses = socket.gethostbyname_ex(query)
    except OSError as exc:
        raise LookupError("gethostbyname failed") from exc
    return HostInfo(query, official, int(socket.AF_INET), 4, tuple(addresses))


def run_host(config: Config, out: TextIO | None = None) -> HostInfo:
    """Look up the configured host and print the result."""
    out = sys.stdout if out is None else out
    info = lookup_host(config.host)
    print(f"Hostname         : {info.query}", file=out)
    print(f"Official name    : {info.official_name}", file=out)
    print(f"Address type     : {info.address_type}", file=out)
    print(f"Address length   : {info.address_length}", file=out)
    for number, address in enumerate(info.addresses, start=1):
        print(f"Address {number}        : {address}", file=out)
    return info