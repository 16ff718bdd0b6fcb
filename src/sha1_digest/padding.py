"""SHA-1 message padding for the final partial block."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_SIZE = 64

# Tails this long or longer leave no room for the marker + length field.
_LENGTH_FIELD_OFFSET = BLOCK_SIZE - 8


@dataclass
class PaddingBlock:
    """Fixed 128-byte buffer holding one or two padding blocks.

    Only the first ``length`` bytes (64 or 128) are meaningful.
    """

    buffer: bytearray
    length: int

    def blocks(self) -> list[memoryview]:
        """Return 64-byte views over the valid blocks, in order."""
        view = memoryview(self.buffer)
        return [view[i:i + BLOCK_SIZE] for i in range(0, self.length, BLOCK_SIZE)]

    def __bytes__(self) -> bytes:
        return bytes(self.buffer[:self.length])


def padding_length(tail_length: int) -> int:
    """Return 64 if the padding fits in one block, else 128."""
    return BLOCK_SIZE if tail_length < _LENGTH_FIELD_OFFSET else 2 * BLOCK_SIZE


def pad_tail(tail: bytes | bytearray | memoryview, total_length: int) -> PaddingBlock:
    """Build the padding block(s) for the last ``len(tail)`` bytes of a message.

    ``total_length`` is the byte length of the *whole* message; the
    bit-length field is derived from it, never from the tail.
    """
    tail_length = len(tail)
    assert tail_length < BLOCK_SIZE, f"tail must be shorter than a block: {tail_length}"

    pad = PaddingBlock(bytearray(2 * BLOCK_SIZE), padding_length(tail_length))
    buf = pad.buffer

    buf[:tail_length] = tail
    buf[tail_length] = 0x80
    buf[tail_length + 1:pad.length] = bytes(pad.length - tail_length - 1)

    bits = (total_length * 8) & 0xFFFFFFFFFFFFFFFF
    pos = pad.length - 1
    while True:
        buf[pos] = bits & 0xFF
        bits >>= 8
        if bits == 0:
            break
        pos -= 1
    return pad
