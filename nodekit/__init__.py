"""Event-driven building blocks: arrays, events, observers, a test runner, UTF and zlib helpers, HTTP heads, DNS, processes, console colours and workers."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "iterator",
    "events",
    "expected",
    "ordered_map",
    "observer",
    "testing",
    "utf",
    "compress",
    "envfile",
    "http",
    "dns",
    "popen",
    "conio",
    "worker",
    "process",
]