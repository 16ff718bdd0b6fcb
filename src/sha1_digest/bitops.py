"""32-bit word primitives."""

from __future__ import annotations

MASK32 = 0xFFFFFFFF


def left_rotate(x: int, n: int) -> int:
    """Rotate the 32-bit word *x* left by *n* bits (1 <= n <= 31)."""
    assert 0 < n < 32, f"rotate amount out of range: {n}"
    return ((x << n) | (x >> (32 - n))) & MASK32
