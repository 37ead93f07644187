"""Report lines that occur more than once in the input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping


def _strip_newline(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def count_lines(stream: Iterable[str], counts: Counter | None = None) -> Counter:
    """Count each line of a text stream, without its line terminator.

    The counts are added to ``counts`` when given; the updated counter is
    returned.
    """
    if counts is None:
        counts = Counter()
    counts.update(_strip_newline(line) for line in stream)
    return counts


def count_text(text: str, counts: Counter | None = None) -> Counter:
    """Count the pieces of ``text`` split on newlines.

    A trailing newline yields a final empty line, which is counted too.
    """
    if counts is None:
        counts = Counter()
    counts.update(text.split("\n"))
    return counts


def duplicates(counts: Mapping[str, int]) -> Iterator[tuple[str, int]]:
    """Yield ``(line, count)`` for every line seen more than once."""
    for line, n in counts.items():
        if n > 1:
            yield line, n


def main(argv: list[str] | None = None) -> int:
    """Count lines from the named files, or standard input, and print duplicates."""
    files = sys.argv[1:] if argv is None else argv
    counts: Counter = Counter()
    if not files:
        count_lines(sys.stdin, counts)
    else:
        for name in files:
            try:
                with open(name, encoding="utf-8", errors="replace", newline="") as f:
                    count_lines(f, counts)
            except OSError as exc:
                print(f"dup: {exc}", file=sys.stderr)
    for line, n in duplicates(counts):
        print(f"{n}\t{line}")
    return 0