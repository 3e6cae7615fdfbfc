"""Strip directory components and a trailing .suffix from file names."""

from __future__ import annotations

import sys


def basename_scan(s: str) -> str:
    """Remove directory components and a .suffix by scanning from the end."""
    for i, ch in reversed(list(enumerate(s))):
        if ch == "/":
            s = s[i + 1:]
            break
    for i, ch in reversed(list(enumerate(s))):
        if ch == ".":
            s = s[:i]
            break
    return s


def basename(s: str) -> str:
    """Remove directory components and a trailing .suffix."""
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def main(argv: list[str] | None = None) -> int:
    for line in sys.stdin:
        print(basename(line.rstrip("\n").rstrip("\r")))
    return 0