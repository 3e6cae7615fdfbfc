"""Report lines that occur more than once in standard input or in files."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping


def _strip_line(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def count_lines(lines: Iterable[str]) -> Counter[str]:
    """Count the lines of a stream, dropping each line's terminator."""
    return Counter(_strip_line(line) for line in lines)


def count_split(text: str) -> Counter[str]:
    """Count the pieces of text split on newlines, keeping a trailing empty piece."""
    return Counter(text.split("\n"))


def format_duplicates(counts: Mapping[str, int]) -> list[str]:
    """Return "count<TAB>line" for every line seen more than once."""
    return [f"{n}\t{line}" for line, n in counts.items() if n > 1]


def _open_lines(path: str):
    return open(path, encoding="utf-8", errors="replace", newline="\n")


def files_with_duplicates(paths: Iterable[str]) -> list[str]:
    """Return the paths of files that hold at least one repeated line.

    Files that cannot be opened are reported on standard error and skipped.
    """
    found = []
    for path in paths:
        try:
            with _open_lines(path) as handle:
                counts = count_lines(handle)
        except OSError as err:
            print(f"dup2: {err}", file=sys.stderr)
            continue
        if any(n > 1 for n in counts.values()):
            found.append(path)
    return found


def _emit(lines: Iterator[str] | list[str]) -> None:
    for line in lines:
        print(line)


def dup1(argv: list[str] | None = None) -> int:
    """Print the count and text of each repeated line of standard input."""
    _emit(format_duplicates(count_lines(sys.stdin)))
    return 0


def dup2(argv: list[str] | None = None) -> int:
    """Print the name of each named file that has repeated lines."""
    paths = sys.argv[1:] if argv is None else argv
    _emit(files_with_duplicates(paths))
    return 0


def dup3(argv: list[str] | None = None) -> int:
    """Print the count and text of lines repeated across the named files."""
    paths = sys.argv[1:] if argv is None else argv
    counts: Counter[str] = Counter()
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as handle:
                data = handle.read()
        except OSError as err:
            print(f"dup3: {err}", file=sys.stderr)
            continue
        counts.update(count_split(data))
    _emit(format_duplicates(counts))
    return 0