"""Key-pair generation from a seed.

The seed is reduced to 32 bytes with SHA3-256 and expanded into a
:class:`~lamport.digest.SeededStream`.  The zero half is drawn first, block by
block, then the one half; the public key is the hash of every secret block.
The same seed therefore always yields the same key pair.
"""

from __future__ import annotations

import logging

from ..digest import SeededStream, as_bytes, hash_block
from ..keys import BLOCK_SIZE, BLOCKS_PER_HALF, KEY_SIZE, KeyHalf, KeyPair, PublicKey, SecretKey

logger = logging.getLogger(__name__)


def _derive_public_half(buffer: bytearray, offset: int) -> KeyHalf:
    digests = []
    for position in range(BLOCKS_PER_HALF):
        start = offset + position * BLOCK_SIZE
        digests.append(hash_block(bytes(buffer[start:start + BLOCK_SIZE])))
    return KeyHalf.from_blocks(digests)


def generate(seed: bytes | bytearray | memoryview | str) -> KeyPair:
    """Derive a one-time key pair from ``seed``.

    Args:
        seed: Arbitrary-length seed material; ``str`` is encoded as UTF-8.  An
            empty seed is accepted but yields a well-known key pair.

    Returns:
        A :class:`~lamport.keys.KeyPair` whose secret half must sign at most
        one message.
    """

    seed_bytes = as_bytes(seed, what="seed")
    if not seed_bytes:
        logger.warning("Generating a Lamport key pair from an empty seed")

    stream = SeededStream(hash_block(seed_bytes))
    buffer = bytearray(KEY_SIZE)
    for start in range(0, KEY_SIZE, BLOCK_SIZE):
        stream.fill(buffer, start, BLOCK_SIZE)

    public = PublicKey(
        zero=_derive_public_half(buffer, 0),
        one=_derive_public_half(buffer, KEY_SIZE // 2),
    )
    secret = SecretKey(buffer)
    buffer[:] = bytes(KEY_SIZE)

    logger.debug("Generated Lamport key pair %s", public.fingerprint())
    return KeyPair(secret=secret, public=public)


__all__ = ["generate"]
