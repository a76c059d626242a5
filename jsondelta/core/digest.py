"""SHA-256 helpers for the identical-file pre-check.

Two files with the same digest are reported as the same without being
parsed. Files are hashed in fixed-size chunks so large documents are never
held twice in memory.
"""
from __future__ import annotations

import hashlib
from typing import BinaryIO

CHUNK_SIZE = 64 * 1024


def stream_sha256_hex(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> str:
    """Compute SHA-256 hex digest of a binary stream, read to the end."""
    h = hashlib.sha256()
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        h.update(chunk)
    return h.hexdigest()
