"""Print only the first instance of each input line."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line the first time it appears."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def _strip(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield line.removesuffix("\n").removesuffix("\r")


def main(argv: list[str] | None = None) -> int:
    """Print each distinct line of standard input once."""
    try:
        for line in dedup(_strip(sys.stdin)):
            print(line)
    except OSError as exc:
        print(f"dedup: {exc}", file=sys.stderr)
        return 1
    return 0