"""Count Unicode characters and the lengths of their UTF-8 encodings."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass, field

UTF_MAX = 4

_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r",
    "\t": "\\t", "\v": "\\v", "\\": "\\\\", "'": "\\'",
}


@dataclass
class CharCounts:
    """Character counts, counts by encoded length, and invalid bytes."""

    counts: Counter = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    return 0


def count_chars(data: bytes) -> CharCounts:
    """Count the characters of UTF-8 data; each bad byte counts as invalid."""
    result = CharCounts()
    pos = 0
    while pos < len(data):
        n = _sequence_length(data[pos])
        try:
            ch = data[pos:pos + n].decode("utf-8") if n else ""
        except UnicodeDecodeError:
            ch = ""
        if len(ch) != 1:
            result.invalid += 1
            pos += 1
            continue
        result.counts[ch] += 1
        result.utflen[n] += 1
        pos += n
    return result


def _quote_rune(ch: str) -> str:
    if ch in _ESCAPES:
        return f"'{_ESCAPES[ch]}'"
    cp = ord(ch)
    if ch.isprintable():
        return f"'{ch}'"
    if cp < 0x20 or cp == 0x7F:
        return f"'\\x{cp:02x}'"
    if cp < 0x10000:
        return f"'\\u{cp:04x}'"
    return f"'\\U{cp:08x}'"


def format_report(counts: CharCounts) -> str:
    """Render the counts as the tab-separated report."""
    lines = ["rune\tcount"]
    lines += [f"{_quote_rune(c)}\t{n}" for c, n in counts.counts.items()]
    lines += ["", "len\tcount"]
    lines += [f"{i}\t{n}" for i, n in enumerate(counts.utflen) if i > 0]
    if counts.invalid > 0:
        lines += ["", f"{counts.invalid} invalid UTF-8 characters"]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    sys.stdout.write(format_report(count_chars(sys.stdin.buffer.read())))
    return 0