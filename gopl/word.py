"""Palindrome checks for word games."""

from __future__ import annotations

from itertools import accumulate


def _utf8(s: str) -> bytes:
    return s.encode("utf-8", "surrogatepass")


def is_palindrome_bytes(s: str) -> bool:
    """Report whether s reads the same forward and backward, byte by byte.

    Only the bytes at which each character's encoding starts are compared
    with their mirror bytes, so accented letters and punctuation defeat it.
    """
    data = _utf8(s)
    starts = accumulate((len(_utf8(ch)) for ch in s), initial=0)
    return all(data[i] == data[-1 - i] for i in starts if i < len(data))


def _lower(ch: str) -> str:
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


def is_palindrome(s: str) -> bool:
    """Report whether s reads the same forward and backward.

    Letter case is ignored, as are non-letters.
    """
    letters = [_lower(ch) for ch in s if ch.isalpha()]
    return letters == letters[::-1]