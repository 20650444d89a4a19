"""Conversions between UTF-8 bytes, UTF-16 code units and UTF-32 code points."""

from __future__ import annotations

from typing import Iterable, Iterator

MAX_CODEPOINT = 0x10FFFF


class UnicodeConversionError(ValueError):
    """Raised when input is not a valid sequence in its encoding."""


def _utf8_codepoints(data: Iterable[int], bad_lead: str) -> Iterator[int]:
    buf = bytes(data)
    i, size = 0, len(buf)
    while i < size:
        lead = buf[i]
        if lead < 0x80:
            width, codepoint = 1, lead
        elif lead & 0xE0 == 0xC0:
            width, codepoint = 2, lead & 0x1F
        elif lead & 0xF0 == 0xE0:
            width, codepoint = 3, lead & 0x0F
        elif lead & 0xF8 == 0xF0:
            width, codepoint = 4, lead & 0x07
        else:
            raise UnicodeConversionError(bad_lead)
        if i + width > size:
            raise UnicodeConversionError("Invalid UTF-8 sequence")
        for cont in buf[i + 1:i + width]:
            codepoint = (codepoint << 6) | (cont & 0x3F)
        yield codepoint
        i += width


def _utf16_codepoints(units: Iterable[int]) -> Iterator[int]:
    seq = list(units)
    i, size = 0, len(seq)
    while i < size:
        unit = seq[i]
        if unit < 0xD800 or unit > 0xDFFF:
            yield unit
            i += 1
        elif unit <= 0xDBFF:
            if i + 1 >= size:
                raise UnicodeConversionError("Invalid UTF-16 sequence")
            low = seq[i + 1]
            if low < 0xDC00 or low > 0xDFFF:
                raise UnicodeConversionError("Invalid UTF-16 low surrogate")
            yield ((unit - 0xD800) << 10) + (low - 0xDC00) + 0x10000
            i += 2
        else:
            raise UnicodeConversionError("Invalid UTF-16 high surrogate")


def _encode_utf8(codepoint: int, message: str) -> bytes:
    if 0 <= codepoint <= 0x7F:
        return bytes((codepoint,))
    if 0 <= codepoint <= 0x7FF:
        return bytes(((codepoint >> 6) | 0xC0, (codepoint & 0x3F) | 0x80))
    if 0 <= codepoint <= 0xFFFF:
        return bytes((
            (codepoint >> 12) | 0xE0,
            ((codepoint >> 6) & 0x3F) | 0x80,
            (codepoint & 0x3F) | 0x80,
        ))
    if 0 <= codepoint <= MAX_CODEPOINT:
        return bytes((
            (codepoint >> 18) | 0xF0,
            ((codepoint >> 12) & 0x3F) | 0x80,
            ((codepoint >> 6) & 0x3F) | 0x80,
            (codepoint & 0x3F) | 0x80,
        ))
    raise UnicodeConversionError(message)


def _encode_utf16(codepoint: int) -> tuple[int, ...]:
    if 0 <= codepoint <= 0xFFFF:
        return (codepoint,)
    if 0 <= codepoint <= MAX_CODEPOINT:
        offset = codepoint - 0x10000
        return ((offset >> 10) + 0xD800, (offset & 0x3FF) + 0xDC00)
    raise UnicodeConversionError("Invalid Unicode codepoint")


def utf8_to_utf32(data: Iterable[int]) -> list[int]:
    """Decode UTF-8 bytes into code points."""
    return list(_utf8_codepoints(data, "Invalid UTF-8 byte"))


def utf32_to_utf8(codepoints: Iterable[int]) -> bytes:
    """Encode code points as UTF-8 bytes."""
    return b"".join(_encode_utf8(cp, "Invalid UTF-32 codepoint") for cp in codepoints)


def utf8_to_utf16(data: Iterable[int]) -> list[int]:
    """Decode UTF-8 bytes into UTF-16 code units."""
    units: list[int] = []
    for codepoint in _utf8_codepoints(data, "Invalid UTF-8 sequence"):
        units.extend(_encode_utf16(codepoint))
    return units


def utf16_to_utf8(units: Iterable[int]) -> bytes:
    """Encode UTF-16 code units as UTF-8 bytes."""
    return b"".join(
        _encode_utf8(cp, "Invalid Unicode codepoint") for cp in _utf16_codepoints(units)
    )


def utf16_to_utf32(units: Iterable[int]) -> list[int]:
    """Combine UTF-16 surrogate pairs into code points."""
    return list(_utf16_codepoints(units))


def utf32_to_utf16(codepoints: Iterable[int]) -> list[int]:
    """Split code points into UTF-16 code units."""
    units: list[int] = []
    for codepoint in codepoints:
        units.extend(_encode_utf16(codepoint))
    return units