"""Demonstration driver: generate, sign and verify one message."""

from __future__ import annotations

import argparse
import json
from typing import Sequence

from .signer import generate, sign
from .verifier import verify

DEFAULT_SEED = "monte near beast"
DEFAULT_MESSAGE = "cucumber"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lamport one-time signature walkthrough")
    parser.add_argument("--seed", default=DEFAULT_SEED, help=f"Seed text (default: {DEFAULT_SEED!r})")
    parser.add_argument("--message", default=DEFAULT_MESSAGE, help=f"Message text (default: {DEFAULT_MESSAGE!r})")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)

    key_pair = generate(args.seed)
    print(f"public key is {json.dumps(key_pair.public.to_dict())}")
    print(f"message is: {args.message}")

    signature = sign(key_pair.secret, args.message)
    print(f"signature of message is {json.dumps(signature.to_list())}")

    verified = verify(key_pair.public, args.message, signature)
    print(f"verification shows: {str(verified).lower()}")


if __name__ == "__main__":
    main()
