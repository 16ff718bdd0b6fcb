"""Hex rendering of digest state words."""

from __future__ import annotations

from sha1_digest.compressor import DigestState


def uint32_to_hex(value: int) -> str:
    """Render a 32-bit word as exactly 8 lowercase hex characters."""
    return f"{value & 0xFFFFFFFF:08x}"


def state_to_hex(state: DigestState) -> str:
    """Concatenate h0..h4 into the 40-character digest string."""
    return "".join(uint32_to_hex(word) for word in state.words())
