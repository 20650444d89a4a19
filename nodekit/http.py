"""HTTP/1.x message heads: status texts, parsing and formatting."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Mapping
from urllib.parse import parse_qsl

_STATUS_TEXT = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    103: "Early Hints",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    226: "IM Used",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a Teapot",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    509: "Bandwidth Limit Exceeded",
    510: "Not Extended",
    511: "Network Authentication Required",
}

_VERSION_RE = re.compile(r"HTTP/\d\.\d")
_STATUS_RE = re.compile(r"^\d+")


class HttpError(Exception):
    """Raised for unknown status codes and malformed message heads."""


@dataclass
class HttpMessage:
    """A parsed request or response head."""

    protocol: str = "HTTP"
    method: str = ""
    path: str = ""
    search: str = ""
    url: str = ""
    version: str = ""
    status: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)


@dataclass
class FetchRequest:
    """What a client sends: method, target URL, headers and an optional body or file."""

    url: str = ""
    method: str = "GET"
    version: str = "HTTP/1.0"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | str = b""
    file: str | os.PathLike[str] | None = None
    timeout: int = 0


def status_text(status: int) -> str:
    """The reason phrase for ``status``."""
    try:
        return _STATUS_TEXT[status]
    except KeyError:
        raise HttpError(f"Status {status} Not Found") from None


def capital_case(name: str) -> str:
    """Capitalise each hyphen-separated word of a header name."""
    return "-".join(word[:1].upper() + word[1:].lower() for word in name.split("-"))


def parse_query(search: str) -> dict[str, str]:
    """Parse a ``?a=1&b=2`` query string into a dict, keeping blank values."""
    return dict(parse_qsl(search.lstrip("?"), keep_blank_values=True))


def parse_head(text: str | bytes) -> HttpMessage:
    """Parse the start line and headers of a request or response."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    lines = text.split("\n")
    start = lines[0].rstrip("\r")
    if not _VERSION_RE.search(start):
        raise HttpError("not an HTTP message head")
    parts = start.split()
    if len(parts) < 3:
        raise HttpError("incomplete start line")

    message = HttpMessage()
    for line in lines[1:]:
        line = line.rstrip("\r")
        name, colon, value = line.partition(":")
        if not colon:
            break
        message.headers[capital_case(name.strip())] = value.strip()

    status = _STATUS_RE.match(parts[1])
    if status is None:
        target = parts[1]
        idx = target.find("?")
        if idx > 0:
            message.path = target[:idx]
            message.search = target[idx:]
            message.query = parse_query(message.search)
        else:
            message.path = target
        message.method = parts[0]
        message.version = parts[2]
        host = message.headers.get("Host") or "localhost"
        message.url = f"http://{host}{message.path}{message.search}"
    else:
        message.version = parts[0]
        message.status = int(status.group())
    return message


def _header_lines(headers: Mapping[str, str]) -> str:
    return "".join(f"{capital_case(name)}: {value}\r\n" for name, value in headers.items())


def format_request_head(
    method: str, path: str, version: str, headers: Mapping[str, str]
) -> str:
    """Build a request start line and headers, ending in a blank line."""
    return f"{method} {path} {version}\r\n{_header_lines(headers)}\r\n"


def format_response_head(version: str, status: int, headers: Mapping[str, str]) -> str:
    """Build a status line and headers, ending in a blank line."""
    return f"{version} {status} {status_text(status)}\r\n{_header_lines(headers)}\r\n"


def format_fetch(request: FetchRequest, path: str) -> bytes:
    """Serialise ``request`` for ``path``, adding Content-Length for a body or file."""
    body = request.body.encode("utf-8") if isinstance(request.body, str) else bytes(request.body)
    head = (
        f"{request.method} {path} {request.version}\r\n"
        f"{_header_lines(request.headers)}"
    )
    if request.file is not None:
        with open(request.file, "rb") as handle:
            payload = handle.read()
    else:
        payload = body
    has_payload = request.file is not None or bool(body)

    if request.method == "HEAD" or not has_payload:
        return (head + "\r\n").encode("latin-1")
    head += f"Content-Length: {len(payload)}\r\n\r\n"
    return head.encode("latin-1") + payload + b"\r\n"