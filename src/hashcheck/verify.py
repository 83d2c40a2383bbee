"""Compare a file against a known-good SHA-256 fingerprint."""

from __future__ import annotations

import hmac
import logging
import os
import string
from dataclasses import dataclass
from pathlib import Path

from hashcheck.digest import DEFAULT_CHUNK_SIZE, HEX_DIGEST_LENGTH, hash_file

_HEX_CHARS = frozenset(string.hexdigits.lower())


class InvalidDigestError(ValueError):
    """Raised when a supplied fingerprint is not a SHA-256 hex digest."""


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of checking one file against an expected digest."""

    path: Path
    expected: str
    actual: str

    @property
    def matched(self) -> bool:
        return hmac.compare_digest(self.expected, self.actual)


def normalize_digest(value: str) -> str:
    """Return `value` stripped and lowercased, or raise if it is not 64 hex chars."""

    candidate = value.strip().lower()
    if len(candidate) != HEX_DIGEST_LENGTH or not set(candidate) <= _HEX_CHARS:
        raise InvalidDigestError(
            f"Expected {HEX_DIGEST_LENGTH} hexadecimal characters, got {value!r}."
        )
    return candidate


def verify_file(
    path: str | os.PathLike[str],
    expected: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    logger: logging.Logger | None = None,
) -> VerificationResult:
    """Hash `path` and compare it with `expected`.

    The expected digest is validated before the file is touched. Hashing
    failures propagate unchanged.
    """
    wanted = normalize_digest(expected)
    actual = hash_file(path, chunk_size=chunk_size, logger=logger)
    return VerificationResult(path=Path(path), expected=wanted, actual=actual)


__all__ = ["InvalidDigestError", "VerificationResult", "normalize_digest", "verify_file"]
