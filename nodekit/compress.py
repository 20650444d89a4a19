"""Incremental deflate/inflate streams with raw, zlib and gzip framing."""

from __future__ import annotations

import enum
import zlib
from typing import Any

from nodekit.events import Event

CHUNK_SIZE = 65536

RAW_WBITS = -15
GZIP_WBITS = 15 | 16
AUTO_WBITS = 15 | 32


class CompressionError(Exception):
    """Raised when a stream cannot be set up or its data is corrupt."""


class _Mode(enum.Enum):
    IDLE = enum.auto()
    INFLATE = enum.auto()
    DEFLATE = enum.auto()


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class ZStream:
    """One compression or decompression stream; its direction is fixed by the first update.

    When ``on_data`` has listeners, output is emitted to them in pieces of
    at most ``chunk_size`` bytes and the update methods return ``b""``.
    """

    def __init__(self, wbits: int = 0, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._wbits = wbits
        self._chunk_size = chunk_size
        self._mode = _Mode.IDLE
        self._stream: Any = None
        self._open = True
        self._freed = False
        self.on_error = Event()
        self.on_drain = Event()
        self.on_close = Event()
        self.on_open = Event()
        self.on_data = Event()

    def __enter__(self) -> "ZStream":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.free()

    def close(self) -> None:
        if self._open:
            self._open = False
            self.on_drain.emit()

    def free(self) -> None:
        """Release the stream and emit ``on_close`` once."""
        if self._freed:
            return
        self._freed = True
        self._stream = None
        self.close()
        self.on_close.emit()

    def is_closed(self) -> bool:
        return not self._open

    def is_available(self) -> bool:
        return self._open

    def _fail(self, message: str, cause: Exception) -> None:
        self.close()
        error = CompressionError(f"{message} {cause}".strip())
        self.on_error.emit(error)
        raise error from cause

    def _deliver(self, output: bytes) -> bytes:
        if self.on_data.empty():
            return output
        for start in range(0, len(output), self._chunk_size):
            self.on_data.emit(output[start:start + self._chunk_size])
        return b""

    def update_inflate(self, data: bytes | str) -> bytes:
        """Decompress ``data``; returns ``b""`` if closed, empty or already deflating."""
        payload = _as_bytes(data)
        if self.is_closed() or not payload or self._mode is _Mode.DEFLATE:
            return b""
        if self._mode is _Mode.IDLE:
            try:
                self._stream = zlib.decompressobj(self._wbits)
            except (ValueError, zlib.error) as exc:
                self._fail("Failed to initialize zlib for decompression.", exc)
            self._mode = _Mode.INFLATE
            self.on_open.emit()
        try:
            output = self._stream.decompress(payload)
        except zlib.error as exc:
            self._fail("Decompression failed:", exc)
        return self._deliver(output)

    def update_deflate(self, data: bytes | str) -> bytes:
        """Compress ``data`` with a partial flush; returns ``b""`` if closed, empty or inflating."""
        payload = _as_bytes(data)
        if self.is_closed() or not payload or self._mode is _Mode.INFLATE:
            return b""
        if self._mode is _Mode.IDLE:
            try:
                self._stream = zlib.compressobj(
                    zlib.Z_DEFAULT_COMPRESSION,
                    zlib.DEFLATED,
                    self._wbits,
                    8,
                    zlib.Z_DEFAULT_STRATEGY,
                )
            except (ValueError, zlib.error) as exc:
                self._fail("Failed to initialize zlib for compression.", exc)
            self._mode = _Mode.DEFLATE
            self.on_open.emit()
        try:
            output = self._stream.compress(payload) + self._stream.flush(zlib.Z_PARTIAL_FLUSH)
        except zlib.error as exc:
            self._fail("Compression failed:", exc)
        return self._deliver(output)


def inflate(data: bytes | str) -> bytes:
    """Decompress raw deflate data."""
    with ZStream(RAW_WBITS) as stream:
        return stream.update_inflate(data)


def deflate(data: bytes | str) -> bytes:
    """Compress into raw deflate data."""
    with ZStream(RAW_WBITS) as stream:
        return stream.update_deflate(data)


def gzip(data: bytes | str) -> bytes:
    """Compress with gzip framing."""
    with ZStream(GZIP_WBITS) as stream:
        return stream.update_deflate(data)


def gunzip(data: bytes | str) -> bytes:
    """Decompress gzip or zlib framed data, detecting the header."""
    with ZStream(AUTO_WBITS) as stream:
        return stream.update_inflate(data)