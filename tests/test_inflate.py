"""
Exact-size decompression contract.
"""
import os
import zlib

import pytest

from pngppm.errors import (
    DecompressCorrupt, DecompressError, DecompressMemory, DecompressTruncated,
    SizeMismatch,
)
from pngppm.inflate import inflate


def test_exact_size():
    raw = os.urandom(1000) + bytes(5000)
    out = inflate(zlib.compress(raw), len(raw))
    assert out == raw
    assert isinstance(out, bytearray)


def test_exact_size_stored_block():
    raw = os.urandom(300)
    assert inflate(zlib.compress(raw, 0), 300) == raw


def test_short_stream_is_size_mismatch():
    raw = bytes(range(100))
    with pytest.raises(SizeMismatch):
        inflate(zlib.compress(raw), 101)
    assert issubclass(SizeMismatch, DecompressError)


def test_long_stream_exceeds_capacity():
    raw = bytes(range(100)) * 3
    with pytest.raises(DecompressTruncated):
        inflate(zlib.compress(raw), 100)


def test_cut_stream_is_truncated():
    stream = zlib.compress(os.urandom(500))
    with pytest.raises(DecompressTruncated):
        inflate(stream[:len(stream) // 2], 500)


def test_empty_stream_is_truncated():
    with pytest.raises(DecompressTruncated):
        inflate(b"", 10)


def test_garbage_is_corrupt():
    with pytest.raises(DecompressCorrupt):
        inflate(b"\x00\x01garbage-not-zlib", 10)


def test_bad_checksum_is_corrupt():
    stream = bytearray(zlib.compress(b"hello world"))
    stream[-1] ^= 0xFF
    with pytest.raises(DecompressCorrupt):
        inflate(bytes(stream), 11)


class _NoMemory:
    def decompress(self, data, max_length=0):
        raise MemoryError


def test_memory_error_is_decompress_memory(monkeypatch):
    monkeypatch.setattr(zlib, "decompressobj", lambda: _NoMemory())
    with pytest.raises(DecompressMemory):
        inflate(zlib.compress(b"abc"), 3)


def test_huge_capacity_is_decompress_memory():
    # capacity does not fit in a C ssize_t
    with pytest.raises(DecompressMemory):
        inflate(zlib.compress(b"abc"), 2**64)
