import io
import socket
from unittest import mock

import pytest

from netprobe.config import Config, Mode
from netprobe.host import HostInfo, lookup_host, run_host

_ANSWER = ("host.example.com", [], ["192.0.2.1", "192.0.2.2"])


def test_lookup_loopback_address():
    info = lookup_host("127.0.0.1")
    assert info.addresses == ("127.0.0.1",)
    assert info.address_type == socket.AF_INET
    assert info.address_length == 4


def test_lookup_empty_name_uses_loopback():
    info = lookup_host("")
    assert info.query == "127.0.0.1"
    assert "127.0.0.1" in info.addresses


def test_lookup_uses_resolver_answer():
    with mock.patch("socket.gethostbyname_ex", return_value=_ANSWER) as resolver:
        info = lookup_host("host.example.com")
    resolver.assert_called_once_with("host.example.com")
    assert info == HostInfo(
        "host.example.com", "host.example.com", int(socket.AF_INET), 4, ("192.0.2.1", "192.0.2.2")
    )


def test_lookup_failure():
    with mock.patch("socket.gethostbyname_ex", side_effect=socket.gaierror("no such host")):
        with pytest.raises(LookupError, match="gethostbyname failed"):
            lookup_host("missing.example.com")


def test_run_host_output():
    out = io.StringIO()
    with mock.patch("socket.gethostbyname_ex", return_value=_ANSWER):
        run_host(Config(mode=Mode.HOST, host="host.example.com"), out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Hostname         : host.example.com"
    assert lines[1] == "Official name    : host.example.com"
    assert lines[3] == "Address length   : 4"
    assert lines[4:] == [
        "Address 1        : 192.0.2.1",
        "Address 2        : 192.0.2.2",
    ]