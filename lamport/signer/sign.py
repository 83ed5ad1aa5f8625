"""One-time signing."""

from __future__ import annotations

import logging

from ..digest import iter_bits, message_digest
from ..errors import KeyReuseError
from ..keys import SecretKey, Signature

logger = logging.getLogger(__name__)


def sign(secret: SecretKey, message: bytes | bytearray | memoryview | str) -> Signature:
    """Sign ``message`` and destroy ``secret``.

    For every bit of ``SHA3-256(message)`` (bytes in order, least-significant
    bit first) the block of the matching secret half is copied into the
    signature.  The secret key is zeroized afterwards, so a second call with
    the same key raises :class:`~lamport.errors.KeyReuseError` instead of
    leaking the other half of the key.
    """

    if not isinstance(secret, SecretKey):
        raise TypeError("secret must be a SecretKey")

    digest = message_digest(message)
    try:
        blocks = secret.reveal(iter_bits(digest))
    except KeyReuseError:
        logger.warning("Refusing to sign with a Lamport secret key that was already used")
        raise

    logger.debug("Signed message with digest %s", digest.hex())
    return Signature.from_blocks(blocks)


__all__ = ["sign"]
