"""Starting child processes and collecting their output."""

from __future__ import annotations

import subprocess
from typing import Sequence


def _argv(path: str, args: Sequence[str] | None) -> list[str]:
    return list(args) if args else [path]


def start(path: str, args: Sequence[str] | None = None) -> subprocess.Popen:
    """Start ``path`` with ``args`` (``args[0]`` is the program name) and pipes on all streams."""
    return subprocess.Popen(
        _argv(path, args),
        executable=path,
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )


def capture(path: str, args: Sequence[str] | None = None) -> str:
    """Run ``path`` to completion and return what it wrote to standard output."""
    completed = subprocess.run(
        _argv(path, args),
        executable=path,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        check=False,
    )
    return completed.stdout.decode("utf-8", errors="replace")