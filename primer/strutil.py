"""String helpers: base names, digit grouping and list formatting."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def basename(s: str) -> str:
    """Remove directory components and a trailing ``.suffix``.

    e.g. a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    s = s.rpartition("/")[2]
    head, dot, _ = s.rpartition(".")
    return head if dot else s


def comma(s: str) -> str:
    """Insert commas every three digits in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers like a list, separated by commas."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def basename_main(argv: list[str] | None = None) -> int:
    """Print the base name of each line read from standard input."""
    for line in sys.stdin:
        print(basename(line.removesuffix("\n").removesuffix("\r")))
    return 0


def comma_main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        print(f"  {comma(arg)}")
    return 0


def printints_main(argv: list[str] | None = None) -> int:
    print(ints_to_string([1, 2, 3]))
    return 0