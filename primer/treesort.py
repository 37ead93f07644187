"""Insertion sort using an unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


def _add(root: _Node | None, value: int) -> _Node:
    node = _Node(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def _in_order(root: _Node | None) -> Iterator[int]:
    stack: list[_Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.value
        current = current.right


def sort(values: list[int]) -> None:
    """Sort ``values`` in place."""
    root: _Node | None = None
    for v in values:
        root = _add(root, v)
    values[:] = list(_in_order(root))