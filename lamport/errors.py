"""Exception types raised by the Lamport one-time signature package."""


class LamportError(Exception):
    """Base class for every error raised by this package."""


class MalformedInputError(LamportError, ValueError):
    """Key, signature or encoding material has the wrong shape."""


class KeyReuseError(LamportError, RuntimeError):
    """A one-time secret key was asked to sign a second message."""


__all__ = [
    "LamportError",
    "MalformedInputError",
    "KeyReuseError",
]
