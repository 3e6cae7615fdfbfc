"""Print only the first instance of each line."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line once, without its terminator, in first-seen order."""
    seen: set[str] = set()
    for line in lines:
        line = line.rstrip("\n").removesuffix("\r")
        if line not in seen:
            seen.add(line)
            yield line


def main(argv: list[str] | None = None) -> int:
    try:
        for line in dedup(sys.stdin):
            print(line)
    except (OSError, UnicodeDecodeError) as err:
        print(f"dedup: {err}", file=sys.stderr)
        return 1
    return 0