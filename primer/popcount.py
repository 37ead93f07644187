"""Population count of 64-bit values using a byte lookup table."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def _build_table() -> tuple[int, ...]:
    table = [0] * 256
    for i in range(1, 256):
        table[i] = table[i // 2] + (i & 1)
    return tuple(table)


_PC = _build_table()


def pop_count(x: int) -> int:
    """Return the number of set bits in ``x`` taken modulo 2**64."""
    x &= _MASK64
    return sum(_PC[(x >> shift) & 0xFF] for shift in range(0, 64, 8))