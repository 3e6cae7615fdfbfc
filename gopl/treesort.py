"""Sort integers by insertion into an unbalanced binary tree."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


def _add(root: _Node | None, value: int) -> _Node:
    node = _Node(value)
    if root is None:
        return node
    t = root
    while True:
        if value < t.value:
            if t.left is None:
                t.left = node
                return root
            t = t.left
        else:
            if t.right is None:
                t.right = node
                return root
            t = t.right


def _in_order(root: _Node | None) -> Iterator[int]:
    stack: list[_Node] = []
    t = root
    while stack or t is not None:
        while t is not None:
            stack.append(t)
            t = t.left
        t = stack.pop()
        yield t.value
        t = t.right


def sort(values: MutableSequence[int]) -> None:
    """Sort values in place."""
    root = None
    for v in values:
        root = _add(root, v)
    values[:] = list(_in_order(root))