"""A directed graph stored as a mapping from node to its successors."""

from __future__ import annotations


class Graph:
    """A directed graph of string nodes."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, src: str, dst: str) -> None:
        self._edges.setdefault(src, set()).add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        return dst in self._edges.get(src, ())


def main(argv: list[str] | None = None) -> int:
    g = Graph()
    for src, dst in (("a", "b"), ("c", "d"), ("a", "d"), ("d", "a")):
        g.add_edge(src, dst)
    queries = [
        ("a", "b"),
        ("c", "d"),
        ("a", "d"),
        ("d", "a"),
        ("x", "b"),
        ("c", "d"),
        ("x", "d"),
        ("d", "x"),
    ]
    for src, dst in queries:
        print("true" if g.has_edge(src, dst) else "false")
    return 0