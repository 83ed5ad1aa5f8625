"""Signature record envelope."""

from .record import ALGORITHM, SignatureRecord

__all__ = [
    "ALGORITHM",
    "SignatureRecord",
]
