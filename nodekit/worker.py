"""Background threads that call a function repeatedly until it asks to stop."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable

MAX_WORKERS = 64

_lock = threading.Lock()
_active = 0


def active_workers() -> int:
    """Number of worker threads currently running."""
    with _lock:
        return _active


class Worker:
    """Runs ``callback(*args)`` in a thread while it returns a non-negative number."""

    def __init__(self, callback: Callable[..., int], *args: Any) -> None:
        self._callback = callback
        self._args = args
        self._closed = threading.Event()
        self._thread: threading.Thread | None = None

    def _loop(self) -> None:
        global _active
        try:
            while not self._closed.is_set():
                if self._callback(*self._args) < 0:
                    break
                time.sleep(0)
        finally:
            with _lock:
                _active -= 1

    def run(self) -> bool:
        """Start the thread; False if already started. Raises RuntimeError at the worker limit."""
        global _active
        if self._thread is not None:
            return False
        with _lock:
            if _active >= MAX_WORKERS:
                raise RuntimeError("too many workers")
            _active += 1
        self._thread = threading.Thread(target=self._loop, daemon=True)
        try:
            self._thread.start()
        except RuntimeError:
            with _lock:
                _active -= 1
            raise
        return True

    def close(self) -> None:
        """Ask the worker to stop after its current call."""
        self._closed.set()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the thread; True when it has finished."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def pid(self) -> int | None:
        """The thread's identifier, or None before ``run``."""
        return None if self._thread is None else self._thread.ident