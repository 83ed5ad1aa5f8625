"""Fixed-size key and signature containers.

Every container is backed by one contiguous buffer whose length is checked on
construction, so a half-key or signature with the wrong number of blocks, or
blocks of the wrong width, can never be built.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, NamedTuple

from ..digest import hash_block
from ..errors import KeyReuseError, MalformedInputError

BLOCK_SIZE = 32
BLOCKS_PER_HALF = 256
HALF_SIZE = BLOCK_SIZE * BLOCKS_PER_HALF
KEY_SIZE = 2 * HALF_SIZE


def _join_blocks(blocks: Iterable[bytes], *, what: str) -> bytes:
    parts: list[bytes] = []
    for index, block in enumerate(blocks):
        if not isinstance(block, (bytes, bytearray, memoryview)):
            raise MalformedInputError(f"{what} block {index} is not bytes")
        if len(block) != BLOCK_SIZE:
            raise MalformedInputError(
                f"{what} block {index} is {len(block)} bytes, expected {BLOCK_SIZE}"
            )
        parts.append(bytes(block))
    if len(parts) != BLOCKS_PER_HALF:
        raise MalformedInputError(f"{what} has {len(parts)} blocks, expected {BLOCKS_PER_HALF}")
    return b"".join(parts)


def _decode_hex_blocks(items: Any, *, what: str) -> bytes:
    if not isinstance(items, list):
        raise MalformedInputError(f"{what} must be a list of hex strings")
    blocks: list[bytes] = []
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise MalformedInputError(f"{what} block {index} is not a hex string")
        try:
            blocks.append(bytes.fromhex(item))
        except ValueError as exc:
            raise MalformedInputError(f"{what} block {index} is not valid hex") from exc
    return _join_blocks(blocks, what=what)


class _BlockBuffer:
    """Read-only sequence view over ``BLOCKS_PER_HALF`` blocks of ``BLOCK_SIZE`` bytes."""

    __slots__ = ()

    buffer: bytes

    def __len__(self) -> int:
        return BLOCKS_PER_HALF

    def __getitem__(self, index: int) -> bytes:
        if not isinstance(index, int):
            raise TypeError("block index must be an integer")
        if index < 0:
            index += BLOCKS_PER_HALF
        if not 0 <= index < BLOCKS_PER_HALF:
            raise IndexError(f"block index {index} out of range")
        start = index * BLOCK_SIZE
        return self.buffer[start:start + BLOCK_SIZE]

    def __iter__(self) -> Iterator[bytes]:
        for start in range(0, HALF_SIZE, BLOCK_SIZE):
            yield self.buffer[start:start + BLOCK_SIZE]

    def to_hex_list(self) -> list[str]:
        return [block.hex() for block in self]


def _check_buffer(buffer: Any, *, what: str) -> bytes:
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise MalformedInputError(f"{what} buffer must be bytes")
    if len(buffer) != HALF_SIZE:
        raise MalformedInputError(f"{what} buffer is {len(buffer)} bytes, expected {HALF_SIZE}")
    return bytes(buffer)


@dataclass(frozen=True, slots=True)
class KeyHalf(_BlockBuffer):
    """256 key blocks selected by one bit value."""

    buffer: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "buffer", _check_buffer(self.buffer, what="key half"))

    @classmethod
    def from_blocks(cls, blocks: Iterable[bytes]) -> "KeyHalf":
        return cls(_join_blocks(blocks, what="key half"))

    @classmethod
    def from_hex_list(cls, items: Any) -> "KeyHalf":
        return cls(_decode_hex_blocks(items, what="key half"))


@dataclass(frozen=True, slots=True)
class Signature(_BlockBuffer):
    """One revealed secret block per digest bit."""

    buffer: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "buffer", _check_buffer(self.buffer, what="signature"))

    @classmethod
    def from_blocks(cls, blocks: Iterable[bytes]) -> "Signature":
        return cls(_join_blocks(blocks, what="signature"))

    def to_list(self) -> list[str]:
        return self.to_hex_list()

    @classmethod
    def from_list(cls, items: Any) -> "Signature":
        return cls(_decode_hex_blocks(items, what="signature"))


@dataclass(frozen=True, slots=True)
class PublicKey:
    """Hashes of every secret block, positionally parallel to the secret key."""

    zero: KeyHalf
    one: KeyHalf

    def __post_init__(self) -> None:
        if not isinstance(self.zero, KeyHalf) or not isinstance(self.one, KeyHalf):
            raise MalformedInputError("public key halves must be KeyHalf instances")

    def half(self, bit: int) -> KeyHalf:
        return self.one if bit else self.zero

    def fingerprint(self) -> str:
        return hash_block(self.zero.buffer + self.one.buffer).hex()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "zero": self.zero.to_hex_list(),
            "one": self.one.to_hex_list(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "PublicKey":
        if not isinstance(data, dict):
            raise MalformedInputError("public key document must be an object")
        return cls(
            zero=KeyHalf.from_hex_list(data.get("zero")),
            one=KeyHalf.from_hex_list(data.get("one")),
        )


class SecretKey:
    """Secret preimages for both halves, held in one mutable buffer.

    The buffer is the zero half followed by the one half.  A secret key signs
    at most once: :meth:`reveal` marks it spent, copies the selected blocks and
    zeroizes the buffer.  Any later access raises :class:`KeyReuseError`.
    """

    __slots__ = ("_buffer", "_consumed")

    def __init__(self, buffer: bytes | bytearray):
        if not isinstance(buffer, (bytes, bytearray)) or len(buffer) != KEY_SIZE:
            raise MalformedInputError(f"secret key buffer must be {KEY_SIZE} bytes")
        self._buffer = bytearray(buffer)
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_live(self) -> None:
        if self._consumed:
            raise KeyReuseError("secret key has already been used or zeroized")

    def block(self, bit: int, position: int) -> bytes:
        """Copy of one secret block; the copy is not wiped by :meth:`zeroize`."""

        self._ensure_live()
        if not 0 <= position < BLOCKS_PER_HALF:
            raise IndexError(f"block index {position} out of range")
        start = (HALF_SIZE if bit else 0) + position * BLOCK_SIZE
        return bytes(self._buffer[start:start + BLOCK_SIZE])

    @property
    def zero(self) -> KeyHalf:
        """Copy of the zero half for inspection.

        The copy is immutable and outlives :meth:`zeroize`; keep it out of
        signing paths.
        """

        self._ensure_live()
        return KeyHalf(bytes(self._buffer[:HALF_SIZE]))

    @property
    def one(self) -> KeyHalf:
        """Copy of the one half; like :attr:`zero`, not wiped by :meth:`zeroize`."""

        self._ensure_live()
        return KeyHalf(bytes(self._buffer[HALF_SIZE:]))

    def reveal(self, bits: Iterable[int]) -> list[bytes]:
        """Copy out one block per position, chosen by ``bits``, then zeroize.

        The key is marked spent before any block is copied.
        """

        selectors = list(bits)
        if len(selectors) != BLOCKS_PER_HALF:
            raise MalformedInputError(f"expected {BLOCKS_PER_HALF} selector bits, got {len(selectors)}")

        self._ensure_live()
        self._consumed = True
        blocks: list[bytes] = []
        try:
            for position, bit in enumerate(selectors):
                start = (HALF_SIZE if bit else 0) + position * BLOCK_SIZE
                blocks.append(bytes(self._buffer[start:start + BLOCK_SIZE]))
        finally:
            self.zeroize()
        return blocks

    def zeroize(self) -> None:
        self._buffer[:] = bytes(len(self._buffer))
        self._consumed = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return hmac.compare_digest(self._buffer, other._buffer)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SecretKey(consumed={self._consumed})"


class KeyPair(NamedTuple):
    secret: SecretKey
    public: PublicKey
