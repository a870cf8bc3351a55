"""Network probe: UDP/TCP throughput, loss and jitter measurement, and IPv4 host lookup."""

__version__ = "0.1.0"

__all__ = ["__version__"]