import socket
from unittest import mock

from nodekit import dns


def test_special_ipv4_names():
    assert dns.lookup_ipv4("localhost") == "127.0.0.1"
    assert dns.lookup_ipv4("broadcast") == "255.255.255.255"
    assert dns.lookup("global") == "0.0.0.0"
    assert dns.lookup("loopback") == "1.1.1.1"


def test_special_ipv6_names():
    assert dns.lookup_ipv6("localhost") == "::1"
    assert dns.lookup_ipv6("broadcast") == "::2"
    assert dns.lookup_ipv6("::0") == "::0"


def test_numeric_ipv4_resolves_to_itself():
    assert dns.lookup_ipv4("10.1.2.3") == "10.1.2.3"


def test_url_host_is_extracted():
    fake = [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("192.0.2.7", 0))]
    with mock.patch("socket.getaddrinfo", return_value=fake) as patched:
        assert dns.lookup_ipv4("http://example.com/path") == "192.0.2.7"
    assert patched.call_args[0][0] == "example.com"


def test_lookup_picks_matching_family():
    fake = [
        (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("2001:db8::1", 0, 0, 0)),
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("192.0.2.9", 0)),
    ]
    with mock.patch("socket.getaddrinfo", return_value=fake):
        assert dns.lookup_ipv4("example.com") == "192.0.2.9"
        assert dns.lookup_ipv6("example.com") == "2001:db8::1"


def test_failed_lookup_returns_none():
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("no")):
        assert dns.lookup_ipv4("example.com") is None
        assert dns.lookup_ipv6("example.com") is None


def test_ip_recognition():
    assert dns.is_ipv4("10.0.0.1")
    assert not dns.is_ipv4("example")
    assert dns.is_ipv6("fe80:0:1")
    assert not dns.is_ipv6("nothing")
    assert dns.is_ip("127.0.0.1")
    assert not dns.is_ip("")
    assert not dns.is_ip("hostname")