"""Command-line entry point."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from .config import Mode, UsageError, parse_arguments, usage
from .host import run_host
from .receiver import run_recv
from .sender import run_send

_RUNNERS = {
    Mode.SEND: run_send,
    Mode.RECV: run_recv,
    Mode.HOST: run_host,
}


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return "netprobe"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the probe with ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = _program_name()
    if not args:
        print(usage(prog), file=sys.stderr)
        return 1
    try:
        config = parse_arguments(args, prog)
        _RUNNERS[config.mode](config)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (OSError, LookupError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())