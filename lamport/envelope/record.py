"""JSON envelope for a Lamport signature and the key that checks it."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from ..digest import message_digest
from ..errors import MalformedInputError
from ..keys import PublicKey, Signature

ALGORITHM = "lamport-ots-sha3-256"

_DIGEST_HEX = re.compile(r"[0-9a-f]{64}")


@dataclass(slots=True)
class SignatureRecord:
    """Envelope binding a message digest to a signature and its public key."""

    algorithm: str
    generated_at: str
    message_sha3_256: str
    public_key: PublicKey
    signature: Signature

    @classmethod
    def create(
        cls, public_key: PublicKey, signature: Signature, message: bytes | str
    ) -> "SignatureRecord":
        return cls(
            algorithm=ALGORITHM,
            generated_at=datetime.now(timezone.utc).isoformat(),
            message_sha3_256=message_digest(message).hex(),
            public_key=public_key,
            signature=signature,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "generated_at": self.generated_at,
            "message_sha3_256": self.message_sha3_256,
            "public_key": self.public_key.to_dict(),
            "signature": self.signature.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "SignatureRecord":
        if not isinstance(data, dict):
            raise MalformedInputError("Signature record must be a JSON object")

        algorithm = data.get("algorithm")
        if algorithm != ALGORITHM:
            raise MalformedInputError(f"Unsupported signature algorithm: {algorithm!r}")

        generated_at = data.get("generated_at")
        digest_hex = data.get("message_sha3_256")
        if not isinstance(generated_at, str) or not isinstance(digest_hex, str):
            raise MalformedInputError("Signature record missing generated_at or message digest")
        if not _DIGEST_HEX.fullmatch(digest_hex):
            raise MalformedInputError("Signature record message digest must be 64 lowercase hex characters")
        try:
            date_parser.isoparse(generated_at)
        except (ValueError, OverflowError) as exc:
            raise MalformedInputError(f"Signature record generated_at {generated_at!r} is not an ISO-8601 timestamp") from exc

        return cls(
            algorithm=algorithm,
            generated_at=generated_at,
            message_sha3_256=digest_hex,
            public_key=PublicKey.from_dict(data.get("public_key")),
            signature=Signature.from_list(data.get("signature")),
        )

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> "SignatureRecord":
        try:
            document = json.loads(text)
        except ValueError as exc:
            raise MalformedInputError("Signature record is not valid JSON") from exc
        return cls.from_dict(document)
