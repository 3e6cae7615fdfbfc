"""A directed graph kept as a map of sets."""

from __future__ import annotations

from collections import defaultdict


class Graph:
    """Directed graph of string nodes."""

    def __init__(self) -> None:
        self._edges: defaultdict[str, set[str]] = defaultdict(set)

    def add_edge(self, src: str, dst: str) -> None:
        self._edges[src].add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        return dst in self._edges.get(src, ())


def main(argv: list[str] | None = None) -> int:
    g = Graph()
    for src, dst in (("a", "b"), ("c", "d"), ("a", "d"), ("d", "a")):
        g.add_edge(src, dst)
    for src, dst in (("a", "b"), ("c", "d"), ("a", "d"), ("d", "a"),
                     ("x", "b"), ("c", "d"), ("x", "d"), ("d", "x")):
        print(str(g.has_edge(src, dst)).lower())
    return 0