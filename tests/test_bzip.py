import bz2
import io
import sys
import types

import pytest

from gopl.bzip import Writer, main


def test_million_hellos():
    compressed = io.BytesIO()
    w = Writer(compressed)
    total = 0
    for _ in range(1_000_000):
        total += w.write(b"hello")
    w.close()
    assert total == 5_000_000
    assert len(compressed.getvalue()) == 255
    assert bz2.decompress(compressed.getvalue()) == b"hello" * 1_000_000


def test_write_returns_length():
    w = Writer(io.BytesIO())
    assert w.write(b"abcdef") == 6
    assert w.write(b"") == 0


def test_context_manager_round_trip():
    buf = io.BytesIO()
    with Writer(buf) as w:
        w.write(b"some text ")
        w.write(b"more text")
    assert w.closed
    assert bz2.decompress(buf.getvalue()) == b"some text more text"


def test_empty_stream():
    buf = io.BytesIO()
    w = Writer(buf)
    w.close()
    assert bz2.decompress(buf.getvalue()) == b""


def test_close_leaves_underlying_stream_open():
    buf = io.BytesIO()
    w = Writer(buf)
    w.write(b"x")
    w.close()
    assert buf.closed is False


def test_write_after_close_raises():
    w = Writer(io.BytesIO())
    w.close()
    with pytest.raises(ValueError, match="closed"):
        w.write(b"data")


def test_double_close_raises():
    w = Writer(io.BytesIO())
    w.close()
    with pytest.raises(ValueError, match="closed"):
        w.close()


def test_main_compresses_stdin(monkeypatch):
    payload = b"line one\nline two\n" * 100
    stdin = types.SimpleNamespace(buffer=io.BytesIO(payload))
    stdout = types.SimpleNamespace(buffer=io.BytesIO())
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    assert main([]) == 0
    assert bz2.decompress(stdout.buffer.getvalue()) == payload