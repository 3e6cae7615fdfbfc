"""Slice growth, in-place filtering and reversal."""

from __future__ import annotations

import sys
from collections.abc import Iterable, MutableSequence


class IntSlice:
    """A window of length len over a shared backing array of capacity cap."""

    __slots__ = ("_array", "_len")

    def __init__(self, values: Iterable[int] = (), cap: int | None = None):
        items = list(values)
        cap = len(items) if cap is None else cap
        if cap < len(items):
            raise ValueError("cap out of range")
        self._array = items + [0] * (cap - len(items))
        self._len = len(items)

    @classmethod
    def _view(cls, array: list[int], length: int) -> IntSlice:
        view = cls.__new__(cls)
        view._array = array
        view._len = length
        return view

    @property
    def cap(self) -> int:
        return len(self._array)

    def __len__(self) -> int:
        return self._len

    def __iter__(self):
        return iter(self._array[: self._len])

    def __getitem__(self, index):
        return self.tolist()[index]

    def __setitem__(self, index: int, value: int) -> None:
        if not -self._len <= index < self._len:
            raise IndexError("index out of range")
        self._array[index % self._len] = value

    def __eq__(self, other) -> bool:
        if isinstance(other, (IntSlice, list)):
            return self.tolist() == list(other)
        return NotImplemented

    def tolist(self) -> list[int]:
        return self._array[: self._len]

    def __str__(self) -> str:
        return "[" + " ".join(map(str, self)) + "]"

    def __repr__(self) -> str:
        return f"IntSlice({self.tolist()!r}, cap={self.cap})"


def _grow(x: IntSlice, zlen: int) -> list[int]:
    if zlen <= x.cap:
        return x._array
    zcap = max(zlen, 2 * len(x))
    return x.tolist() + [0] * (zcap - len(x))


def append_int(x: IntSlice, y: int) -> IntSlice:
    """Append y, reusing x's array when it has room, else doubling."""
    array = _grow(x, len(x) + 1)
    array[len(x)] = y
    return IntSlice._view(array, len(x) + 1)


def append_slice(x: IntSlice, *args: int) -> IntSlice:
    """Append all of args, reusing or growing the array as append_int does."""
    zlen = len(x) + len(args)
    array = _grow(x, zlen)
    array[len(x):zlen] = args
    return IntSlice._view(array, zlen)


def growth_report(n: int) -> list[str]:
    """Show the capacity after each of n appends."""
    lines = []
    x = IntSlice()
    for i in range(n):
        x = append_int(x, i)
        lines.append(f"{i}  cap={x.cap}\t{x}")
    return lines


def nonempty(strings: MutableSequence[str]) -> list[str]:
    """Return the non-empty strings, overwriting the front of the input."""
    i = 0
    for s in list(strings):
        if s:
            strings[i] = s
            i += 1
    return list(strings[:i])


def nonempty2(strings: MutableSequence[str]) -> list[str]:
    """Like nonempty, built by appending into the input's own storage."""
    kept = [s for s in strings if s]
    strings[: len(kept)] = kept
    return kept


def reverse(values: MutableSequence[int]) -> None:
    """Reverse values in place."""
    values[:] = values[::-1]


def _go_list(values: Iterable) -> str:
    return "[" + " ".join(map(str, values)) + "]"


def main(argv: list[str] | None = None) -> int:
    a = [0, 1, 2, 3, 4, 5]
    reverse(a)
    print(_go_list(a))
    s = [0, 1, 2, 3, 4, 5]
    head, tail = s[:2], s[2:]
    reverse(head)
    reverse(tail)
    s = head + tail
    reverse(s)
    print(_go_list(s))
    for line in sys.stdin:
        try:
            ints = [int(field) for field in line.split()]
        except ValueError as err:
            bad = next(f for f in line.split() if not f.lstrip("+-").isdigit())
            print(f'strconv.ParseInt: parsing "{bad}": invalid syntax', file=sys.stderr)
            del err
            continue
        reverse(ints)
        print(_go_list(ints))
    return 0