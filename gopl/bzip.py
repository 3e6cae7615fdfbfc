"""A writer that bzip2-compresses what is written to it."""

from __future__ import annotations

import bz2
import sys
from typing import BinaryIO

BLOCK_SIZE = 9
_CHUNK = 64 * 1024


class Writer:
    """Compress written data into an underlying binary stream.

    Closing flushes the compressed data; the underlying stream stays open.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        return self._compressor is None

    def _open_compressor(self) -> bz2.BZ2Compressor:
        if self._compressor is None:
            raise ValueError("closed")
        return self._compressor

    def write(self, data: bytes) -> int:
        """Compress data; return the number of uncompressed bytes taken."""
        compressed = self._open_compressor().compress(data)
        if compressed:
            self._out.write(compressed)
        return memoryview(data).nbytes

    def close(self) -> None:
        """Write the rest of the compressed stream and finish it."""
        compressor = self._open_compressor()
        self._compressor = None
        self._out.write(compressor.flush())

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *exc) -> None:
        if not self.closed:
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Compress standard input to standard output."""
    writer = Writer(sys.stdout.buffer)
    try:
        while chunk := sys.stdin.buffer.read(_CHUNK):
            writer.write(chunk)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        writer.close()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0