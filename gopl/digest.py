"""Compare SHA-256 digests of two strings."""

from __future__ import annotations

import hashlib


def compare_digests(a: str, b: str) -> tuple[str, str, bool]:
    """Return both hex digests and whether they are equal."""
    c1 = hashlib.sha256(a.encode()).digest()
    c2 = hashlib.sha256(b.encode()).digest()
    return c1.hex(), c2.hex(), c1 == c2


def main(argv: list[str] | None = None) -> int:
    h1, h2, same = compare_digests("x", "X")
    print(h1)
    print(h2)
    print(str(same).lower())
    print("[32]uint8")
    return 0