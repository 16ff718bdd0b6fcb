"""SHA-1 block compression.

One call consumes exactly one 64-byte block and returns the updated
digest state. The state is an immutable value, so a computation in
progress never shares accumulators with any other.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from sha1_digest.bitops import MASK32, left_rotate
from sha1_digest.padding import BLOCK_SIZE

# ---------------------------------------------------------------------------
# Round constants
# ---------------------------------------------------------------------------

K0 = 0x5A827999
K1 = 0x6ED9EBA1
K2 = 0x8F1BBCDC
K3 = 0xCA62C1D6

_BLOCK_WORDS = struct.Struct(">16I")


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DigestState:
    """The five 32-bit accumulators of a SHA-1 computation."""

    h0: int = 0x67452301
    h1: int = 0xEFCDAB89
    h2: int = 0x98BADCFE
    h3: int = 0x10325476
    h4: int = 0xC3D2E1F0

    def words(self) -> tuple[int, int, int, int, int]:
        return (self.h0, self.h1, self.h2, self.h3, self.h4)


# ---------------------------------------------------------------------------
# Compression
# ---------------------------------------------------------------------------


def message_schedule(data: bytes | bytearray | memoryview, offset: int = 0) -> list[int]:
    """Expand the block at *offset* into the 80-word message schedule."""
    w = list(_BLOCK_WORDS.unpack_from(data, offset))
    for i in range(16, 80):
        w.append(left_rotate(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    return w


def compress(
    state: DigestState,
    data: bytes | bytearray | memoryview,
    offset: int = 0,
) -> DigestState:
    """Compress the 64-byte block starting at *offset* of *data* into *state*."""
    assert 0 <= offset and offset + BLOCK_SIZE <= len(data), (
        f"block at offset {offset} runs past end of {len(data)}-byte buffer"
    )
    w = message_schedule(data, offset)
    a, b, c, d, e = state.words()

    for i in range(0, 20):
        t = (left_rotate(a, 5) + ((b & c) ^ (~b & d)) + e + K0 + w[i]) & MASK32
        e, d, c, b, a = d, c, left_rotate(b, 30), a, t

    for i in range(20, 40):
        t = (left_rotate(a, 5) + (b ^ c ^ d) + e + K1 + w[i]) & MASK32
        e, d, c, b, a = d, c, left_rotate(b, 30), a, t

    for i in range(40, 60):
        t = (left_rotate(a, 5) + ((b & c) ^ (b & d) ^ (c & d)) + e + K2 + w[i]) & MASK32
        e, d, c, b, a = d, c, left_rotate(b, 30), a, t

    for i in range(60, 80):
        t = (left_rotate(a, 5) + (b ^ c ^ d) + e + K3 + w[i]) & MASK32
        e, d, c, b, a = d, c, left_rotate(b, 30), a, t

    return DigestState(
        (state.h0 + a) & MASK32,
        (state.h1 + b) & MASK32,
        (state.h2 + c) & MASK32,
        (state.h3 + d) & MASK32,
        (state.h4 + e) & MASK32,
    )


def compress_blocks(
    state: DigestState,
    data: bytes | bytearray | memoryview,
    count: int,
    offset: int = 0,
) -> DigestState:
    """Compress *count* consecutive blocks of *data* starting at *offset*."""
    for i in range(count):
        state = compress(state, data, offset + i * BLOCK_SIZE)
    return state
