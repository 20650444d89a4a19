import struct

import pytest

from nodekit.utf import (
    UnicodeConversionError,
    utf8_to_utf16,
    utf8_to_utf32,
    utf16_to_utf8,
    utf16_to_utf32,
    utf32_to_utf8,
    utf32_to_utf16,
)

SAMPLES = ["", "hello", "ñandú", "€ 5", "日本語", "emoji 😀 ok", "𝄞 clef"]


def _units(text):
    raw = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def _points(text):
    return [ord(c) for c in text]


@pytest.mark.parametrize("text", SAMPLES)
def test_utf8_to_utf32_matches_codepoints(text):
    assert utf8_to_utf32(text.encode("utf-8")) == _points(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_utf32_to_utf8_matches_encoding(text):
    assert utf32_to_utf8(_points(text)) == text.encode("utf-8")


@pytest.mark.parametrize("text", SAMPLES)
def test_utf8_to_utf16_matches_encoding(text):
    assert utf8_to_utf16(text.encode("utf-8")) == _units(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_utf16_to_utf8_matches_encoding(text):
    assert utf16_to_utf8(_units(text)) == text.encode("utf-8")


@pytest.mark.parametrize("text", SAMPLES)
def test_utf16_utf32_round_trip(text):
    points = utf16_to_utf32(_units(text))
    assert points == _points(text)
    assert utf32_to_utf16(points) == _units(text)


def test_accepts_list_of_ints():
    assert utf8_to_utf32(list(b"abc")) == _points("abc")


def test_pinned_euro_sign():
    assert utf32_to_utf8([0x20AC]) == b"\xe2\x82\xac"


def test_pinned_surrogate_pair():
    assert utf32_to_utf16([0x1F600]) == [0xD83D, 0xDE00]


def test_lone_surrogate_codepoint_passes_through_utf16():
    assert utf32_to_utf16([0xD800]) == [0xD800]


@pytest.mark.parametrize("data", [b"\xe2\x82", b"\xc3", b"\xf0\x9f\x98"])
def test_truncated_utf8_raises(data):
    with pytest.raises(UnicodeConversionError):
        utf8_to_utf32(data)
    with pytest.raises(UnicodeConversionError):
        utf8_to_utf16(data)


def test_invalid_utf8_lead_byte_raises():
    with pytest.raises(UnicodeConversionError, match="Invalid UTF-8 byte"):
        utf8_to_utf32(b"\xff")
    with pytest.raises(UnicodeConversionError, match="Invalid UTF-8 sequence"):
        utf8_to_utf16(b"\xff")


def test_utf8_to_utf16_rejects_out_of_range_codepoint():
    with pytest.raises(UnicodeConversionError, match="Invalid Unicode codepoint"):
        utf8_to_utf16(b"\xf7\xbf\xbf\xbf")


@pytest.mark.parametrize("func", [utf32_to_utf8, utf32_to_utf16])
def test_codepoint_too_large_raises(func):
    with pytest.raises(UnicodeConversionError):
        func([0x110000])


@pytest.mark.parametrize("func", [utf16_to_utf8, utf16_to_utf32])
def test_unpaired_low_surrogate_raises(func):
    with pytest.raises(UnicodeConversionError, match="high surrogate"):
        func([0xDC00])


@pytest.mark.parametrize("func", [utf16_to_utf8, utf16_to_utf32])
def test_high_surrogate_without_low_raises(func):
    with pytest.raises(UnicodeConversionError, match="low surrogate"):
        func([0xD800, ord("A")])
    with pytest.raises(UnicodeConversionError, match="UTF-16 sequence"):
        func([0xD800])