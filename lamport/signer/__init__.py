"""Key-pair generation and one-time signing."""

from .keygen import generate
from .sign import sign

__all__ = [
    "generate",
    "sign",
]
