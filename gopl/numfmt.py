"""Format numbers: commas at powers of 1000 and bracketed integer lists."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def comma(s: str) -> str:
    """Insert commas into a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers like "[1, 2, 3]"."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def main(argv: list[str] | None = None) -> int:
    for arg in sys.argv[1:] if argv is None else argv:
        print(f"  {comma(arg)}")
    return 0