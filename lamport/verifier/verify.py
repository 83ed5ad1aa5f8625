"""Signature verification."""

from __future__ import annotations

import hmac
import logging
from typing import Sequence

from ..digest import hash_block, iter_bits, message_digest
from ..keys import BLOCK_SIZE, BLOCKS_PER_HALF, PublicKey, Signature

logger = logging.getLogger(__name__)


def verify(
    public: PublicKey,
    message: bytes | bytearray | memoryview | str,
    signature: Signature | Sequence[bytes],
) -> bool:
    """Check ``signature`` over ``message`` against ``public``.

    Walks the message digest bit by bit in the same order as signing and
    compares the hash of each revealed block with the public block of the
    selected half, stopping at the first mismatch.

    Args:
        public: Public key of the signer.
        message: The claimed message; ``str`` is encoded as UTF-8.
        signature: A :class:`~lamport.keys.Signature` or any sequence of
            32-byte blocks.

    Returns:
        ``True`` only if all 256 positions match.  Wrong-length sequences and
        blocks of the wrong width give ``False`` rather than an exception.
    """

    if not isinstance(public, PublicKey):
        raise TypeError("public must be a PublicKey")

    digest = message_digest(message)
    blocks = list(signature)
    if len(blocks) != BLOCKS_PER_HALF:
        logger.debug("Rejecting signature with %d blocks", len(blocks))
        return False

    for position, bit in enumerate(iter_bits(digest)):
        block = blocks[position]
        if not isinstance(block, (bytes, bytearray, memoryview)) or len(block) != BLOCK_SIZE:
            logger.debug("Rejecting malformed signature block at position %d", position)
            return False
        expected = public.half(bit)[position]
        if not hmac.compare_digest(hash_block(bytes(block)), expected):
            logger.debug("Signature mismatch at position %d", position)
            return False

    return True


__all__ = ["verify"]
