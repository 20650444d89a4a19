"""Loading of KEY=VALUE environment files and environment helpers."""

from __future__ import annotations

import os
from typing import MutableMapping


def parse_env(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines.

    Double quotes group text (spaces and separators inside are kept, the
    quotes dropped); unquoted spaces are ignored; ``#`` or ``;`` starts a
    comment. Entries with an empty key or value are left out.
    """
    result: dict[str, str] = {}
    key = ""
    buf: list[str] = []
    quoted = False
    comment = False

    def commit() -> None:
        value = "".join(buf)
        buf.clear()
        if key and value:
            result[key] = value

    for ch in text:
        if ch == '"':
            quoted = not quoted
            continue
        if not quoted and ch in " \r":
            continue
        if not quoted and ch in "#;":
            comment = True
            continue
        if ch == "=" and not quoted and not comment:
            key = "".join(buf)
            buf.clear()
            continue
        if ch == "\n" and not quoted:
            commit()
            key = ""
            comment = False
            continue
        if not comment:
            buf.append(ch)
    commit()
    return result


def load_env_file(
    path: str | os.PathLike[str], environ: MutableMapping[str, str] | None = None
) -> dict[str, str]:
    """Read ``path``, store its entries in ``environ`` (default ``os.environ``), return them."""
    target = os.environ if environ is None else environ
    with open(path, encoding="utf-8") as handle:
        entries = parse_env(handle.read())
    target.update(entries)
    return entries


def _env(environ: MutableMapping[str, str] | None) -> MutableMapping[str, str]:
    return os.environ if environ is None else environ


def is_child(environ: MutableMapping[str, str] | None = None) -> bool:
    """True when the CHILD variable is set to a non-empty value."""
    return bool(_env(environ).get("CHILD", ""))


def is_parent(environ: MutableMapping[str, str] | None = None) -> bool:
    return not is_child(environ)


def home(environ: MutableMapping[str, str] | None = None) -> str:
    """The user's home directory from the environment, or ``""``."""
    name = "USERPROFILE" if os.name == "nt" else "HOME"
    return _env(environ).get(name, "")


def shell(environ: MutableMapping[str, str] | None = None) -> str:
    """The user's command shell from the environment, or ``""``."""
    name = "COMSPEC" if os.name == "nt" else "SHELL"
    return _env(environ).get(name, "")