import zlib

import pytest

from nodekit.compress import (
    CompressionError,
    ZStream,
    deflate,
    gunzip,
    gzip,
    inflate,
)

TEXT = b"the quick brown fox jumps over the lazy dog. " * 40


def test_deflate_inflate_round_trip():
    packed = deflate(TEXT)
    assert len(packed) < len(TEXT)
    assert inflate(packed) == TEXT


def test_gzip_gunzip_round_trip():
    assert gunzip(gzip(TEXT)) == TEXT


def test_gzip_has_gzip_magic():
    assert gzip(TEXT)[:2] == b"\x1f\x8b"


def test_str_input_is_encoded():
    assert inflate(deflate("héllo wörld")) == "héllo wörld".encode("utf-8")


def test_inflate_reads_standard_raw_deflate():
    comp = zlib.compressobj(wbits=-15)
    packed = comp.compress(TEXT) + comp.flush()
    assert inflate(packed) == TEXT


def test_gunzip_detects_zlib_header():
    assert gunzip(zlib.compress(TEXT)) == TEXT


def test_deflate_output_readable_by_stdlib():
    dec = zlib.decompressobj(-15)
    assert dec.decompress(deflate(TEXT)) == TEXT


def test_empty_input_gives_empty_output():
    assert deflate(b"") == b""
    assert inflate(b"") == b""


def test_streaming_in_pieces():
    packer = ZStream(-15)
    parts = [packer.update_deflate(TEXT[:500]), packer.update_deflate(TEXT[500:])]
    unpacker = ZStream(-15)
    restored = b"".join(unpacker.update_inflate(p) for p in parts)
    assert restored == TEXT


def test_on_data_receives_chunks():
    stream = ZStream(-15, chunk_size=64)
    chunks = []
    stream.on_data.on(chunks.append)
    returned = stream.update_inflate(deflate(TEXT))
    assert returned == b""
    assert b"".join(chunks) == TEXT
    assert all(len(c) <= 64 for c in chunks)


def test_direction_is_fixed_by_first_update():
    stream = ZStream(-15)
    assert stream.update_deflate(TEXT)
    assert stream.update_inflate(deflate(TEXT)) == b""


def test_on_open_emitted_once():
    opened = []
    stream = ZStream(-15)
    stream.on_open.on(lambda: opened.append(True))
    stream.update_deflate(b"a" * 10)
    stream.update_deflate(b"b" * 10)
    assert len(opened) == 1


def test_corrupt_data_raises_and_closes():
    stream = ZStream(-15)
    errors = []
    stream.on_error.on(errors.append)
    with pytest.raises(CompressionError):
        stream.update_inflate(b"\xff\xff\xff\xff\xff")
    assert stream.is_closed()
    assert len(errors) == 1


def test_invalid_deflate_window_raises():
    with pytest.raises(CompressionError):
        ZStream(0).update_deflate(TEXT)


def test_closed_stream_returns_empty():
    stream = ZStream(-15)
    stream.close()
    assert not stream.is_available()
    assert stream.update_deflate(TEXT) == b""


def test_free_emits_drain_and_close_once():
    events = []
    stream = ZStream(-15)
    stream.on_drain.on(lambda: events.append("drain"))
    stream.on_close.on(lambda: events.append("close"))
    stream.free()
    stream.free()
    assert events == ["drain", "close"]
    assert stream.is_closed()


def test_context_manager_frees():
    with ZStream(-15) as stream:
        stream.update_deflate(TEXT)
    assert stream.is_closed()


def test_chunk_size_must_be_positive():
    with pytest.raises(ValueError):
        ZStream(-15, chunk_size=0)