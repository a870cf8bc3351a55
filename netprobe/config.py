"""Command-line configuration for the network probe."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

LOCAL_HOST = "127.0.0.1"
ANY_HOST = "0.0.0.0"


class Mode(Enum):
    """What the probe does once started."""

    SEND = "Send"
    RECV = "Recv"
    HOST = "Host"


class Proto(Enum):
    """Transport protocol used for sending and receiving."""

    UDP = "UDP"
    TCP = "TCP"


class UsageError(Exception):
    """Raised when the command line cannot be understood."""


@dataclass
class Config:
    """Probe settings; the defaults match a bare invocation."""

    mode: Mode = Mode.SEND
    stat: int = 500  # ms between statistics reports
    host: str = ""
    rhost: str = LOCAL_HOST
    rport: int = 4180
    lhost: str = ANY_HOST
    lport: int = 4180
    proto: Proto = Proto.UDP
    pkt_size: int = 1000  # bytes
    pkt_rate: int = 1000  # bytes/s
    pkt_num: int = 0  # 0 means no limit
    sbuf_size: int = 1000  # bytes

    def summary_lines(self) -> list[str]:
        """Return the settings block printed before sending or receiving."""
        return [
            f"Mode             : {self.mode.value}",
            f"Stat             : {self.stat} ms",
            f"Remote Host      : {self.rhost}",
            f"Remote Port      : {self.rport}",
            f"Local Host       : {self.lhost}",
            f"Local Port       : {self.lport}",
            f"Protocol         : {self.proto.value}",
            f"Packet Size      : {self.pkt_size} bytes",
            f"Packet Rate      : {self.pkt_rate} bytes/s",
            f"Packet Number    : {self.pkt_num}",
            f"Socket Buffer    : {self.sbuf_size} bytes",
        ]


# Option name -> whether it takes an argument.
_OPTIONS: dict[str, bool] = {
    "send": False,
    "recv": False,
    "host": True,
    "stat": True,
    "rhost": True,
    "rport": True,
    "lhost": True,
    "lport": True,
    "proto": True,
    "pktsize": True,
    "pktrate": True,
    "pktnum": True,
    "sbufsize": True,
    "help": False,
}

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def usage(prog: str) -> str:
    """Return the usage line for the program called ``prog``."""
    return (
        f"Usage: {prog} [-send|-recv|-host hostname] [-stat yyy] [-rhost hostname] "
        "[-rport portnum] [-lhost hostname] [-lport portnum] [-proto tcp|udp] "
        "[-pktsize bsize] [-pktrate txrate] [-pktnum num] [-sbufsize bsize]"
    )


def _to_int(text: str) -> int:
    """Read a leading decimal integer the lenient way; no digits gives 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _to_port(text: str) -> int:
    return _to_int(text) & 0xFFFF


def _match_option(name: str) -> str | None:
    if name in _OPTIONS:
        return name
    candidates = [option for option in _OPTIONS if option.startswith(name)]
    return candidates[0] if len(candidates) == 1 else None


def _apply(config: Config, option: str, value: str, prog: str) -> None:
    match option:
        case "send":
            config.mode = Mode.SEND
        case "recv":
            config.mode = Mode.RECV
        case "host":
            config.mode = Mode.HOST
            config.host = value
        case "stat":
            config.stat = _to_int(value)
        case "rhost":
            # Accepted on the command line but deliberately left unused.
            pass
        case "rport":
            config.rport = _to_port(value)
        case "lhost":
            config.lhost = value
        case "lport":
            config.lport = _to_port(value)
        case "proto":
            if value == "udp":
                config.proto = Proto.UDP
            elif value == "tcp":
                config.proto = Proto.TCP
            else:
                raise UsageError("Invalid protocol")
        case "pktsize":
            config.pkt_size = _to_int(value)
        case "pktrate":
            config.pkt_rate = _to_int(value)
        case "pktnum":
            config.pkt_num = _to_int(value)
        case "sbufsize":
            config.sbuf_size = _to_int(value)
        case _:
            raise UsageError(usage(prog))


def parse_arguments(argv: Sequence[str], prog: str = "netprobe") -> Config:
    """Build a Config from command-line arguments (without the program name).

    Options may start with one or two dashes, may be abbreviated to any
    unambiguous prefix and take their value either after ``=`` or as the
    next argument. Arguments that are not options are ignored.
    """
    config = Config()
    args = list(argv)
    index = 0
    while index < len(args):
        arg = args[index]
        index += 1
        if arg == "--":
            break
        if not arg.startswith("-") or arg == "-":
            continue
        body = arg[2:] if arg.startswith("--") else arg[1:]
        name, has_value, value = body.partition("=")
        option = _match_option(name)
        if option is None:
            raise UsageError(usage(prog))
        if _OPTIONS[option]:
            if not has_value:
                if index >= len(args):
                    raise UsageError(usage(prog))
                value = args[index]
                index += 1
        elif has_value:
            raise UsageError(usage(prog))
        _apply(config, option, value, prog)
    return config