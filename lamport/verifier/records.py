"""Validation of stored signature records."""

from __future__ import annotations

import hmac
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dateutil import parser as date_parser
from jsonschema import Draft202012Validator

from ..digest import message_digest
from ..envelope import SignatureRecord
from ..keys import PublicKey
from .verify import verify


def default_schema_path() -> Path:
    return Path(__file__).resolve().parent / "schema" / "signature_record.schema.json"


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def validate_record_document(document: Any, schema_path: Path | None = None) -> list[str]:
    """Return schema and timestamp errors for a parsed signature record.

    An empty list means the document is well formed; it says nothing about
    whether the signature is valid.
    """

    schema = _load_json(schema_path or default_schema_path())
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda err: [str(part) for part in err.path])
    messages = [f"{list(error.path)}: {error.message}" for error in errors]

    if isinstance(document, dict) and isinstance(document.get("generated_at"), str):
        try:
            date_parser.isoparse(document["generated_at"])
        except (ValueError, OverflowError):
            messages.append(f"['generated_at']: {document['generated_at']!r} is not an ISO-8601 timestamp")

    return messages


@dataclass(frozen=True)
class RecordVerification:
    """Outcome of checking a signature record against a message."""

    passed: bool
    errors: list[str]


def verify_record(
    record: SignatureRecord,
    message: bytes | str,
    *,
    public_key: PublicKey | None = None,
) -> RecordVerification:
    """Check the digest, optional key pin and signature of ``record``."""

    errors: list[str] = []

    digest_hex = message_digest(message).hex()
    if not hmac.compare_digest(digest_hex.encode("ascii"), record.message_sha3_256.encode("utf-8")):
        errors.append("Message digest does not match signature record")

    if public_key is not None and public_key.fingerprint() != record.public_key.fingerprint():
        errors.append("Public key does not match signature record")

    if not errors and not verify(record.public_key, message, record.signature):
        errors.append("Signature verification failed")

    return RecordVerification(passed=not errors, errors=errors)


__all__ = [
    "RecordVerification",
    "default_schema_path",
    "validate_record_document",
    "verify_record",
]
