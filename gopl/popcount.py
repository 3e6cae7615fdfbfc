"""Count the set bits of 64-bit values in three ways."""

from __future__ import annotations

import time
from decimal import Decimal

_MASK64 = (1 << 64) - 1


def _build_table() -> bytes:
    table = bytearray(256)
    for i in range(1, 256):
        table[i] = table[i // 2] + (i & 1)
    return bytes(table)


_PC = _build_table()


def pop_count(x: int) -> int:
    """Return the number of set bits in the 64-bit value x."""
    return sum(_PC[b] for b in (x & _MASK64).to_bytes(8, "little"))


def modified_pop_count(x: int) -> int:
    """Return the number of set bits in x, looking up one byte per step."""
    x &= _MASK64
    return sum(_PC[(x >> shift) & 0xFF] for shift in range(0, 64, 8))


def shifted_pop_count(x: int) -> int:
    """Sum the low bit of the low byte of x as it is shifted by 0, 1, 2, ...

    The shift grows on every step, so this does not count all set bits.
    """
    x &= _MASK64
    steps = x if x < (1 << 63) else 0
    value = x & 0xFF
    total = 0
    for shift in range(steps):
        value = (value >> shift) & 0xFF
        if value == 0:
            break
        total = (total + (value & 1)) & 0xFF
    return total


def _decimal_text(value: Decimal) -> str:
    text = format(value.normalize(), "f")
    return text


def _format_duration(ns: int) -> str:
    if ns == 0:
        return "0s"
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return _decimal_text(Decimal(ns).scaleb(-3)) + "µs"
    if ns < 1_000_000_000:
        return _decimal_text(Decimal(ns).scaleb(-6)) + "ms"
    hours, rest = divmod(ns, 3_600_000_000_000)
    minutes, rest = divmod(rest, 60_000_000_000)
    text = f"{hours}h" if hours else ""
    if hours or minutes:
        text += f"{minutes}m"
    return text + _decimal_text(Decimal(rest).scaleb(-9)) + "s"


def main(argv: list[str] | None = None) -> int:
    num = 91232341
    for label, func in (
        ("PopCount", pop_count),
        ("ModifiedPopCount", modified_pop_count),
        ("ShiftePopCount", shifted_pop_count),
    ):
        start = time.perf_counter_ns()
        result = func(num)
        elapsed = time.perf_counter_ns() - start
        print(f"{label} result {result}, elapsed time {_format_duration(elapsed)}")
    return 0