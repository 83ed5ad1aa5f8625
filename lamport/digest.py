"""Hashing, seeded randomness and digest bit helpers.

Every hash computed by the package goes through :func:`hash_block`, which is
SHA3-256.  Key material is drawn from :class:`SeededStream`, a SHAKE-256 stream
in counter mode keyed by a 32-byte seed.  Signing and verification agree on
which secret half is revealed at each position only because both walk the
digest with :func:`iter_bits`: bytes in digest order, least-significant bit
first within each byte.
"""

from __future__ import annotations

import hashlib
from typing import Iterator

from .errors import MalformedInputError

DIGEST_SIZE = 32
SEED_SIZE = 32

_STREAM_CHUNK = 136


def hash_block(data: bytes) -> bytes:
    """Return the 32-byte SHA3-256 digest of ``data``."""

    return hashlib.sha3_256(data).digest()


def as_bytes(value: bytes | bytearray | memoryview | str, *, what: str = "message") -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{what} must be bytes or str, got {type(value).__name__}")


def message_digest(message: bytes | bytearray | memoryview | str) -> bytes:
    return hash_block(as_bytes(message))


def bit_at(digest: bytes, position: int) -> int:
    """Return bit ``position`` of ``digest`` (LSB first within each byte)."""

    if not 0 <= position < 8 * len(digest):
        raise IndexError(f"bit position {position} outside digest of {len(digest)} bytes")
    return (digest[position // 8] >> (position % 8)) & 1


def iter_bits(digest: bytes) -> Iterator[int]:
    for byte in digest:
        for shift in range(8):
            yield (byte >> shift) & 1


class SeededStream:
    """Deterministic byte stream expanded from a 32-byte seed.

    Chunk ``k`` of the stream is ``SHAKE-256(seed || uint64_be(k))`` truncated
    to 136 bytes; reads consume the chunks in order, so the output depends only
    on the seed and the total number of bytes drawn before each read.
    """

    def __init__(self, seed: bytes):
        if not isinstance(seed, (bytes, bytearray)) or len(seed) != SEED_SIZE:
            raise MalformedInputError(f"stream seed must be {SEED_SIZE} bytes")
        self._seed = bytes(seed)
        self._counter = 0
        self._buffer = bytearray()

    def _refill(self) -> None:
        block = hashlib.shake_256(self._seed + self._counter.to_bytes(8, "big")).digest(_STREAM_CHUNK)
        self._buffer += block
        self._counter += 1

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be non-negative")
        while len(self._buffer) < size:
            self._refill()
        out = bytes(self._buffer[:size])
        del self._buffer[:size]
        return out

    def fill(self, target: bytearray, offset: int = 0, size: int | None = None) -> None:
        """Overwrite ``target[offset:offset + size]`` with the next stream bytes."""

        if size is None:
            size = len(target) - offset
        target[offset:offset + size] = self.read(size)


__all__ = [
    "DIGEST_SIZE",
    "SEED_SIZE",
    "SeededStream",
    "as_bytes",
    "bit_at",
    "hash_block",
    "iter_bits",
    "message_digest",
]
