"""A small sequential test runner with pass/fail/skip events."""

from __future__ import annotations

import enum
import sys
from typing import Any, Callable, TextIO

from nodekit.events import Event


class Outcome(enum.IntEnum):
    FAILED = -1
    SKIPPED = 0
    PASSED = 1


def _outcome_of(result: Any) -> Outcome:
    try:
        return Outcome(result)
    except (ValueError, TypeError):
        return Outcome.SKIPPED


class TestSuite:
    """Runs named callbacks in order; each returns 1 (pass), -1 (fail) or anything else (skip).

    A callback that raises counts as failed.
    """

    __test__ = False

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._cases: list[tuple[str, Callable[[], Any]]] = []
        self._ignored = False
        self.on_done = Event()
        self.on_fail = Event()
        self.on_skip = Event()
        self.on_close = Event()

    @property
    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def add(self, name: str, callback: Callable[[], Any]) -> None:
        self._cases.append((name, callback))

    def ignore(self) -> None:
        """Stop running further cases."""
        self._ignored = True

    def unignore(self) -> None:
        self._ignored = False

    def run(self) -> list[tuple[str, Outcome]]:
        """Run every case until ignored; return each name with its outcome."""
        results: list[tuple[str, Outcome]] = []
        stream = self._stream
        for name, callback in self._cases:
            if self._ignored:
                break
            stream.write(f"\nTEST:> {name}\n")
            try:
                outcome = _outcome_of(callback())
            except Exception:
                outcome = Outcome.FAILED
            if outcome is Outcome.PASSED:
                stream.write(f"DONE: {name} PASSED\n\n")
                self.on_done.emit()
            elif outcome is Outcome.FAILED:
                stream.write(f"ERROR: {name} FAILED\n\n")
                self.on_fail.emit()
            else:
                stream.write(f"WARNING: {name} SKIPPED\n\n")
                self.on_skip.emit()
            results.append((name, outcome))
        self.on_close.emit()
        return results