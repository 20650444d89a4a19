"""Host name resolution and IP address recognition."""

from __future__ import annotations

import re
import socket
from urllib.parse import urlsplit

IPV4_PATTERN = re.compile(r"([0-9]+\.)+[0-9]+")
IPV6_PATTERN = re.compile(r"([0-9a-fA-F]+\:)+[0-9a-fA-F]+")

_IPV4_SPECIAL = {
    "255.255.255.255": "255.255.255.255",
    "broadcast": "255.255.255.255",
    "127.0.0.1": "127.0.0.1",
    "localhost": "127.0.0.1",
    "0.0.0.0": "0.0.0.0",
    "global": "0.0.0.0",
    "1.1.1.1": "1.1.1.1",
    "loopback": "1.1.1.1",
}

_IPV6_SPECIAL = {
    "broadcast": "::2",
    "::2": "::2",
    "localhost": "::1",
    "::1": "::1",
    "global": "::0",
    "::0": "::0",
    "loopback": "::3",
    "::3": "::3",
}


def _host_of(host: str) -> str:
    if "://" in host:
        return urlsplit(host).hostname or ""
    return host


def _resolve(host: str, family: int) -> str | None:
    try:
        results = socket.getaddrinfo(
            _host_of(host), None, socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
        )
    except (socket.gaierror, UnicodeError):
        return None
    addresses = [info[4][0] for info in results if info[0] == family]
    return addresses[-1] if addresses else None


def lookup_ipv4(host: str) -> str | None:
    """Resolve ``host`` (a name or a URL) to an IPv4 address, or None."""
    special = _IPV4_SPECIAL.get(host)
    if special is not None:
        return special
    return _resolve(host, socket.AF_INET)


def lookup_ipv6(host: str) -> str | None:
    """Resolve ``host`` (a name or a URL) to an IPv6 address, or None."""
    special = _IPV6_SPECIAL.get(host)
    if special is not None:
        return special
    return _resolve(host, socket.AF_INET6)


def lookup(host: str) -> str | None:
    return lookup_ipv4(host)


def is_ipv4(text: str) -> bool:
    return IPV4_PATTERN.search(text) is not None


def is_ipv6(text: str) -> bool:
    return IPV6_PATTERN.search(text) is not None


def is_ip(text: str) -> bool:
    if not text:
        return False
    return is_ipv4(text) or is_ipv6(text)