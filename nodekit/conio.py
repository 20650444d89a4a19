"""Coloured console output using ANSI escape sequences."""

from __future__ import annotations

import enum
import sys
from typing import Any, TextIO


class Color(enum.IntEnum):
    """Colour codes; combine a colour with BOLD for the bright variant."""

    BLACK = 0x00
    WHITE = 0x01
    GREEN = 0x02
    RED = 0x03
    BLUE = 0x04
    CYAN = 0x05
    YELLOW = 0x06
    MAGENTA = 0x07
    BOLD = 0x10


_ANSI_OFFSET = {
    Color.BLACK: 0,
    Color.RED: 1,
    Color.GREEN: 2,
    Color.YELLOW: 3,
    Color.BLUE: 4,
    Color.MAGENTA: 5,
    Color.CYAN: 6,
    Color.WHITE: 7,
}

_RESET = "\x1b[0m"


def _split_color(color: int) -> tuple[bool, int]:
    value = int(color)
    bright = bool(value & Color.BOLD)
    base = value & 0x0F
    try:
        return bright, _ANSI_OFFSET[Color(base)]
    except (ValueError, KeyError):
        raise ValueError(f"unknown color {value:#x}") from None


class Console:
    """Writes text with pending attributes, which are cleared after every write."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err
        self._codes: list[int] = []

    @property
    def _stdout(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def _stderr(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def foreground(self, color: int) -> None:
        bright, offset = _split_color(color)
        if bright:
            self._codes.append(1)
        self._codes.append(30 + offset)

    def background(self, color: int) -> None:
        bright, offset = _split_color(color)
        self._codes.append((100 if bright else 40) + offset)

    def inverse(self) -> None:
        self._codes.append(7)

    def underscore(self) -> None:
        self._codes.append(4)

    def reset(self) -> None:
        self._codes.clear()

    def _write(self, stream: TextIO, args: tuple[Any, ...]) -> int:
        text = " ".join(str(arg) for arg in args)
        if self._codes:
            prefix = "\x1b[" + ";".join(str(code) for code in self._codes) + "m"
            stream.write(prefix + text + _RESET)
        else:
            stream.write(text)
        self._codes.clear()
        return len(text)

    def log(self, *args: Any) -> int:
        """Write the arguments, space separated, to standard output; return the text length."""
        return self._write(self._stdout, args)

    def err(self, *args: Any) -> int:
        """Write the arguments, space separated, to standard error; return the text length."""
        return self._write(self._stderr, args)

    def error(self, msg: Any) -> int:
        self.foreground(Color.RED | Color.BOLD)
        return self.log(msg)

    def info(self, msg: Any) -> int:
        self.foreground(Color.CYAN | Color.BOLD)
        return self.log(msg)

    def done(self, msg: Any) -> int:
        self.foreground(Color.GREEN | Color.BOLD)
        return self.log(msg)

    def warn(self, msg: Any) -> int:
        self.foreground(Color.YELLOW | Color.BOLD)
        return self.log(msg)