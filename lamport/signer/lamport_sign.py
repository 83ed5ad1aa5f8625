"""Command-line entry point: generate a one-time key pair and sign once."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from ..envelope import SignatureRecord
from .keygen import generate
from .sign import sign

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class SignConfig:
    seed: bytes
    message: bytes
    output: Path
    public_key_out: Path | None
    log_level: str


def _read_file(path: Path, what: str) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise SystemExit(f"Cannot read {what} file: {exc}") from exc


def _parse_args(argv: Sequence[str] | None) -> SignConfig:
    parser = argparse.ArgumentParser(description="Sign one message with a fresh Lamport key pair")
    seed = parser.add_mutually_exclusive_group(required=True)
    seed.add_argument("--seed", help="Seed text (UTF-8) the key pair is derived from")
    seed.add_argument("--seed-file", type=Path, help="File holding raw seed bytes")
    message = parser.add_mutually_exclusive_group(required=True)
    message.add_argument("--message", help="Message text (UTF-8)")
    message.add_argument("--message-file", type=Path, help="File holding the raw message bytes")
    parser.add_argument("--output", type=Path, required=True, help="Where to write the signature record")
    parser.add_argument("--public-key-out", type=Path, help="Also write the public key as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    return SignConfig(
        seed=_read_file(args.seed_file, "seed") if args.seed_file else args.seed.encode("utf-8"),
        message=_read_file(args.message_file, "message") if args.message_file else args.message.encode("utf-8"),
        output=args.output,
        public_key_out=args.public_key_out,
        log_level=args.log_level,
    )


def _write_json(path: Path, document: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=2)
    return path


def main(argv: Sequence[str] | None = None) -> None:
    config = _parse_args(argv)
    logging.basicConfig(level=config.log_level)

    key_pair = generate(config.seed)
    signature = sign(key_pair.secret, config.message)
    record = SignatureRecord.create(key_pair.public, signature, config.message)

    try:
        record_path = _write_json(config.output, record.to_dict())
        public_path: Path | None = None
        if config.public_key_out:
            public_path = _write_json(config.public_key_out, key_pair.public.to_dict())
    except OSError as exc:
        raise SystemExit(f"Cannot write output: {exc}") from exc

    summary = {
        "record": str(record_path),
        "public_key": str(public_path) if public_path else None,
        "public_key_fingerprint": key_pair.public.fingerprint(),
        "message_sha3_256": record.message_sha3_256,
        "generated_at": record.generated_at,
    }
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
