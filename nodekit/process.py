"""Command-line start-up: plain arguments and ``?key=value`` environment settings."""

from __future__ import annotations

import os
import re
import sys
from typing import MutableMapping, Sequence

from nodekit.http import parse_query

_QUERY_ARG = re.compile(r"^\?")


def parse_argv(argv: Sequence[str] | None = None) -> tuple[list[str], dict[str, str]]:
    """Split ``argv`` into plain arguments and settings from ``?a=1&b=2`` arguments."""
    source = sys.argv if argv is None else argv
    args: list[str] = []
    settings: dict[str, str] = {}
    for arg in source:
        if _QUERY_ARG.match(arg):
            settings.update(parse_query(arg))
        else:
            args.append(arg)
    return args, settings


def start(
    argv: Sequence[str] | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> list[str]:
    """Store the settings from ``argv`` in ``environ`` (default ``os.environ``); return the plain arguments."""
    args, settings = parse_argv(argv)
    target = os.environ if environ is None else environ
    target.update(settings)
    return args