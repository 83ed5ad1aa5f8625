"""Verifier package for Lamport one-time signatures."""

from .records import (  # noqa: F401
    RecordVerification,
    default_schema_path,
    validate_record_document,
    verify_record,
)
from .verify import verify  # noqa: F401
