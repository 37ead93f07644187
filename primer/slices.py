"""In-place list algorithms: dropping empty strings, reversing and rotating."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return the non-empty strings, in order."""
    return [s for s in strings if s != ""]


def reverse(values: list) -> None:
    """Reverse ``values`` in place."""
    values.reverse()


def rotate_left(values: list, n: int) -> None:
    """Rotate ``values`` left by ``n`` positions in place.

    Raises ``ValueError`` when ``n`` is negative or larger than the list.
    """
    if not 0 <= n <= len(values):
        raise ValueError(f"rotation {n} out of range for length {len(values)}")
    values[:] = values[n:] + values[:n]


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f'strconv.ParseInt: parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'strconv.ParseInt: parsing "{text}": value out of range')
    return value


def _format(values: Iterable[int]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def main(argv: list[str] | None = None) -> int:
    """Show reversal and rotation, then reverse each line of integers read."""
    a = [0, 1, 2, 3, 4, 5]
    reverse(a)
    print(_format(a))

    s = [0, 1, 2, 3, 4, 5]
    rotate_left(s, 2)
    print(_format(s))

    for line in sys.stdin:
        try:
            ints = [_parse_int(field) for field in line.split()]
        except ValueError as exc:
            print(exc, file=sys.stderr)
            continue
        reverse(ints)
        print(_format(ints))
    return 0