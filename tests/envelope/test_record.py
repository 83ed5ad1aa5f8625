import json

import pytest
from dateutil import parser as date_parser

from lamport.envelope import ALGORITHM, SignatureRecord
from lamport.errors import MalformedInputError
from lamport.digest import message_digest
from lamport.signer import generate, sign


@pytest.fixture
def record():
    secret, public = generate("record-seed")
    message = b"attested payload"
    return SignatureRecord.create(public, sign(secret, message), message)


def test_create_stamps_digest_and_time(record):
    assert record.algorithm == ALGORITHM
    assert record.message_sha3_256 == message_digest(b"attested payload").hex()
    assert date_parser.isoparse(record.generated_at).tzinfo is not None


def test_json_round_trip(record):
    restored = SignatureRecord.from_json(record.to_json())

    assert restored == record
    document = json.loads(record.to_json(indent=None))
    assert len(document["signature"]) == 256
    assert set(document["public_key"]) == {"zero", "one"}


def test_unknown_algorithm_rejected(record):
    document = record.to_dict()
    document["algorithm"] = "ed25519"

    with pytest.raises(MalformedInputError, match="Unsupported signature algorithm"):
        SignatureRecord.from_dict(document)


def test_truncated_signature_rejected(record):
    document = record.to_dict()
    document["signature"] = document["signature"][:255]

    with pytest.raises(MalformedInputError):
        SignatureRecord.from_dict(document)


def test_missing_digest_rejected(record):
    document = record.to_dict()
    del document["message_sha3_256"]

    with pytest.raises(MalformedInputError, match="message digest"):
        SignatureRecord.from_dict(document)


def test_invalid_json_rejected():
    with pytest.raises(MalformedInputError, match="not valid JSON"):
        SignatureRecord.from_json("{not json")
    with pytest.raises(MalformedInputError):
        SignatureRecord.from_json("[]")


@pytest.mark.parametrize("digest", ["not-a-digest", "é" * 64, "AB" * 32, "ab" * 31])
def test_malformed_digest_rejected(record, digest):
    document = record.to_dict()
    document["message_sha3_256"] = digest

    with pytest.raises(MalformedInputError, match="64 lowercase hex"):
        SignatureRecord.from_dict(document)


def test_unparsable_timestamp_rejected(record):
    document = record.to_dict()
    document["generated_at"] = "yesterday-ish"

    with pytest.raises(MalformedInputError, match="ISO-8601"):
        SignatureRecord.from_dict(document)
