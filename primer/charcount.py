"""Count Unicode characters and UTF-8 encoding lengths in a byte stream."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

UTF_MAX = 4

_RUNE_ESCAPES = {
    "'": "\\'",
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


@dataclass
class CharCounts:
    """Character counts, counts of encoding lengths and invalid bytes."""

    counts: Counter = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield ``(char, size)``; an undecodable byte yields ``(None, 1)``."""
    i = 0
    while i < len(data):
        size = _sequence_length(data[i])
        char = None
        if size:
            chunk = data[i : i + size]
            if len(chunk) == size:
                try:
                    char = chunk.decode("utf-8")
                except UnicodeDecodeError:
                    char = None
        if char is None:
            yield None, 1
            i += 1
        else:
            yield char, size
            i += size


def count_chars(data: bytes) -> CharCounts:
    """Count the characters of UTF-8 ``data``, noting invalid bytes."""
    result = CharCounts()
    for char, size in _decode(data):
        if char is None:
            result.invalid += 1
            continue
        result.counts[char] += 1
        result.utflen[size] += 1
    return result


def _quote_rune(ch: str) -> str:
    if ch in _RUNE_ESCAPES:
        body = _RUNE_ESCAPES[ch]
    elif ch.isprintable():
        body = ch
    elif ord(ch) < 0x80:
        body = f"\\x{ord(ch):02x}"
    elif ord(ch) < 0x10000:
        body = f"\\u{ord(ch):04x}"
    else:
        body = f"\\U{ord(ch):08x}"
    return f"'{body}'"


def main(argv: list[str] | None = None) -> int:
    """Report character counts for standard input."""
    try:
        data = sys.stdin.buffer.read()
    except OSError as exc:
        print(f"charcount: {exc}", file=sys.stderr)
        return 1
    result = count_chars(data)
    print("rune\tcount")
    for ch, n in result.counts.items():
        print(f"{_quote_rune(ch)}\t{n}")
    print("\nlen\tcount")
    for i, n in enumerate(result.utflen):
        if i > 0:
            print(f"{i}\t{n}")
    if result.invalid > 0:
        print(f"\n{result.invalid} invalid UTF-8 characters")
    return 0