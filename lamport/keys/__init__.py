"""Key, signature and key-pair containers."""

from ..errors import KeyReuseError, LamportError, MalformedInputError
from .blocks import (
    BLOCK_SIZE,
    BLOCKS_PER_HALF,
    HALF_SIZE,
    KEY_SIZE,
    KeyHalf,
    KeyPair,
    PublicKey,
    SecretKey,
    Signature,
)

__all__ = [
    "BLOCK_SIZE",
    "BLOCKS_PER_HALF",
    "HALF_SIZE",
    "KEY_SIZE",
    "KeyHalf",
    "KeyPair",
    "PublicKey",
    "SecretKey",
    "Signature",
    "LamportError",
    "MalformedInputError",
    "KeyReuseError",
]
