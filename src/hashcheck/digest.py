"""Streaming SHA-256 digests for files on disk."""

from __future__ import annotations

import hashlib
import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO

from hashcheck.errors import (
    AccessDeniedError,
    NotFoundError,
    OtherOpenFailureError,
    ReadFailureError,
)

DEFAULT_CHUNK_SIZE = 8192
DIGEST_SIZE = 32
HEX_DIGEST_LENGTH = DIGEST_SIZE * 2

_LOGGER = logging.getLogger(__name__)


def hash_stream(handle: BinaryIO, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> tuple[str, int]:
    """Consume `handle` in chunks and return ``(hex_digest, bytes_read)``."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    digest = hashlib.sha256()
    total = 0
    for chunk in iter(lambda: handle.read(chunk_size), b""):
        digest.update(chunk)
        total += len(chunk)
    return digest.hexdigest(), total


def hash_file(
    path: str | os.PathLike[str],
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    logger: logging.Logger | None = None,
) -> str:
    """Return the lowercase SHA-256 hex digest of the file at `path`.

    The file is read in `chunk_size` pieces so memory use does not grow with
    the file. Failures raise a :class:`~hashcheck.errors.HashError` subclass
    naming the cause; a digest is only ever returned for the complete stream.
    `logger` receives DEBUG traces (byte count, digest) and defaults to the
    module logger.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    log = logger or _LOGGER
    target = Path(path)

    with _open_for_read(target) as handle:
        try:
            hex_digest, total = hash_stream(handle, chunk_size=chunk_size)
        except OSError as exc:
            raise ReadFailureError(target, exc.strerror or str(exc)) from exc

    log.debug("Read %s bytes from %s", total, target)
    log.debug("Computed SHA-256 hash for %s: %s", target, hex_digest)
    return hex_digest


def _open_for_read(path: Path) -> BinaryIO:
    """Open `path` for binary reading, mapping OS errors onto open failures.

    Non-regular files are rejected before `open()` so a FIFO without a writer
    cannot block the call.
    """

    try:
        if not stat.S_ISREG(path.stat().st_mode):
            raise OtherOpenFailureError(path, "not a regular file")
        handle = path.open("rb")
    except FileNotFoundError as exc:
        raise NotFoundError(path) from exc
    except PermissionError as exc:
        raise AccessDeniedError(path) from exc
    except OSError as exc:
        raise OtherOpenFailureError(path, exc.strerror or str(exc)) from exc

    try:
        mode = os.fstat(handle.fileno()).st_mode
    except OSError as exc:
        handle.close()
        raise OtherOpenFailureError(path, exc.strerror or str(exc)) from exc

    if not stat.S_ISREG(mode):
        handle.close()
        raise OtherOpenFailureError(path, "not a regular file")
    return handle


__all__ = ["DEFAULT_CHUNK_SIZE", "DIGEST_SIZE", "HEX_DIGEST_LENGTH", "hash_file", "hash_stream"]
