"""SHA-1 digests of byte buffers and files, reading files in chunks."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from sha1_digest.compressor import DigestState, compress, compress_blocks
from sha1_digest.formatter import state_to_hex
from sha1_digest.padding import BLOCK_SIZE, pad_tail

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096

BufferLike = bytes | bytearray | memoryview


class ShortReadError(OSError):
    """The file yielded fewer bytes than its size promised."""


# ---------------------------------------------------------------------------
# Shared driver steps
# ---------------------------------------------------------------------------


def _as_buffer(data: object) -> BufferLike:
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, memoryview):
        return data if data.format == "B" and data.ndim == 1 and data.contiguous else data.tobytes()
    raise TypeError(f"data must be bytes-like, not {type(data).__name__}")


def _finish(state: DigestState, data: BufferLike, total_length: int) -> DigestState:
    """Compress every whole block of *data*, then pad and compress its tail."""
    full_blocks = len(data) >> 6
    state = compress_blocks(state, data, full_blocks)

    tail = memoryview(data)[full_blocks * BLOCK_SIZE:]
    for block in pad_tail(tail, total_length).blocks():
        state = compress(state, block)
    return state


def _read_exact(f: BinaryIO, size: int) -> bytes:
    data = f.read(size)
    if len(data) != size:
        raise ShortReadError(f"expected {size} bytes, got {len(data)}")
    return data


def hash_stream(f: BinaryIO, chunk_size: int = CHUNK_SIZE) -> DigestState:
    """Digest a seekable binary stream from its start, *chunk_size* bytes at a time.

    The total size is taken up front and drives the bit-length field, so
    the stream must not grow or shrink while it is read.
    """
    if chunk_size <= 0 or chunk_size % BLOCK_SIZE:
        raise ValueError(f"chunk_size must be a positive multiple of {BLOCK_SIZE}, got {chunk_size}")

    file_size = f.seek(0, os.SEEK_END)
    f.seek(0)

    state = DigestState()
    consumed = 0
    chunks = 0
    while file_size - consumed > chunk_size:
        chunk = _read_exact(f, chunk_size)
        state = compress_blocks(state, chunk, chunk_size // BLOCK_SIZE)
        consumed += chunk_size
        chunks += 1

    # Remainder may span several blocks; it is 0 only for an empty stream.
    remainder = _read_exact(f, file_size - consumed)
    state = _finish(state, remainder, file_size)

    logger.debug(
        "Hashed %d bytes: %d full chunk(s) of %d, remainder %d",
        file_size, chunks, chunk_size, len(remainder),
    )
    return state


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def sha1_bytes(data: BufferLike) -> str:
    """Compute the SHA-1 hex digest of an in-memory buffer."""
    buf = _as_buffer(data)
    return state_to_hex(_finish(DigestState(), buf, len(buf)))


def sha1_text(text: str, encoding: str = "utf-8") -> str:
    """Compute the SHA-1 hex digest of *text* encoded with *encoding*."""
    return sha1_bytes(text.encode(encoding))


def sha1_file(path: Path | str, chunk_size: int = CHUNK_SIZE) -> str:
    """Compute the SHA-1 hex digest of a file, reading in chunks.

    Returns an empty string, after logging the reason, when the file
    cannot be opened or read. A partial digest is never returned.
    """
    try:
        f = open(path, "rb")
    except OSError as exc:
        logger.error("Can not open file: %s (%s)", path, exc.strerror or exc)
        return ""

    with f:
        try:
            state = hash_stream(f, chunk_size)
        except OSError as exc:
            logger.error("Failed reading %s: %s", path, exc)
            return ""
    return state_to_hex(state)
