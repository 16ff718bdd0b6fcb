"""Pure-Python SHA-1 digests for byte buffers and streamed files."""

from sha1_digest.compressor import DigestState
from sha1_digest.hasher import CHUNK_SIZE, sha1_bytes, sha1_file, sha1_text

__all__ = ["CHUNK_SIZE", "DigestState", "sha1_bytes", "sha1_file", "sha1_text"]
