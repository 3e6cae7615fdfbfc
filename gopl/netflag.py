"""Network interface flags used as a bit field."""

from __future__ import annotations

import enum


class Flags(enum.IntFlag):
    """Interface flags, in the conventional bit order."""

    UP = 1 << 0
    BROADCAST = 1 << 1
    LOOPBACK = 1 << 2
    POINTTOPOINT = 1 << 3
    MULTICAST = 1 << 4


def is_up(v: Flags) -> bool:
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return v with the up flag cleared."""
    return Flags(int(v) & ~int(Flags.UP))


def set_broadcast(v: Flags) -> Flags:
    """Return v with the broadcast flag set."""
    return Flags(int(v) | int(Flags.BROADCAST))


def is_cast(v: Flags) -> bool:
    return int(v) & int(Flags.BROADCAST | Flags.MULTICAST) != 0


def _line(v: Flags, flag: bool) -> str:
    return f"{int(v):b} {str(flag).lower()}"


def main(argv: list[str] | None = None) -> int:
    v = Flags.MULTICAST | Flags.UP
    print(_line(v, is_up(v)))
    v = turn_down(v)
    print(_line(v, is_up(v)))
    v = set_broadcast(v)
    print(_line(v, is_up(v)))
    print(_line(v, is_cast(v)))
    return 0