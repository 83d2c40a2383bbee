"""Streaming SHA-256 fingerprints for single files."""

from __future__ import annotations

import logging

from .digest import DEFAULT_CHUNK_SIZE, DIGEST_SIZE, HEX_DIGEST_LENGTH, hash_file, hash_stream
from .errors import (
    AccessDeniedError,
    HashError,
    NotFoundError,
    OpenError,
    OtherOpenFailureError,
    ReadFailureError,
)
from .verify import InvalidDigestError, VerificationResult, normalize_digest, verify_file

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AccessDeniedError",
    "DEFAULT_CHUNK_SIZE",
    "DIGEST_SIZE",
    "HEX_DIGEST_LENGTH",
    "HashError",
    "InvalidDigestError",
    "NotFoundError",
    "OpenError",
    "OtherOpenFailureError",
    "ReadFailureError",
    "VerificationResult",
    "hash_file",
    "hash_stream",
    "normalize_digest",
    "verify_file",
]
