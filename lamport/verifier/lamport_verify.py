"""Command-line verifier for Lamport signature records."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from ..errors import MalformedInputError
from ..envelope import SignatureRecord
from ..keys import PublicKey
from .records import default_schema_path, validate_record_document, verify_record

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _read_message(args: argparse.Namespace) -> bytes:
    if args.message_file:
        try:
            return Path(args.message_file).read_bytes()
        except OSError as exc:
            raise SystemExit(f"Cannot read message file: {exc}") from exc
    return args.message.encode("utf-8")


def _load_public_key(path: Path | None) -> PublicKey | None:
    if path is None:
        return None
    try:
        return PublicKey.from_dict(_load_json(path))
    except OSError as exc:
        raise SystemExit(f"Cannot read public key file: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid public key file: {exc}") from exc


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Verify a Lamport one-time signature record")
    parser.add_argument("--record", type=Path, required=True, help="Signature record written by lamport-sign")
    message = parser.add_mutually_exclusive_group(required=True)
    message.add_argument("--message", help="Message text (UTF-8)")
    message.add_argument("--message-file", type=Path, help="File holding the raw message bytes")
    parser.add_argument("--public-key", type=Path, help="Expected public key (JSON); pins the signer")
    parser.add_argument("--schema", type=Path, default=default_schema_path())
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        document = _load_json(args.record)
    except OSError as exc:
        raise SystemExit(f"Cannot read signature record: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Signature record is not valid JSON: {exc}") from exc

    try:
        schema_errors = validate_record_document(document, args.schema)
    except OSError as exc:
        raise SystemExit(f"Cannot read schema: {exc}") from exc
    if schema_errors:
        raise SystemExit("; ".join(schema_errors))

    try:
        record = SignatureRecord.from_dict(document)
    except MalformedInputError as exc:
        raise SystemExit(str(exc)) from exc

    message = _read_message(args)
    public_key = _load_public_key(args.public_key)

    result = verify_record(record, message, public_key=public_key)
    if not result.passed:
        raise SystemExit("; ".join(result.errors))

    print(
        json.dumps(
            {
                "status": "ok",
                "algorithm": record.algorithm,
                "generated_at": record.generated_at,
                "message_sha3_256": record.message_sha3_256,
                "public_key_fingerprint": record.public_key.fingerprint(),
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
