"""Failure types raised while fingerprinting a file."""

from __future__ import annotations

import os
from pathlib import Path


class HashError(RuntimeError):
    """Raised when a digest cannot be produced for ``path``."""

    reason = "hash unavailable"

    def __init__(self, path: str | os.PathLike[str], detail: str | None = None) -> None:
        self.path = Path(path)
        self.detail = detail
        message = f"{self.reason}: {self.path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class OpenError(HashError):
    """The file could not be opened for reading."""

    reason = "cannot open file"


class NotFoundError(OpenError):
    reason = "file not found"


class AccessDeniedError(OpenError):
    reason = "permission denied"


class OtherOpenFailureError(OpenError):
    """Opening failed for a reason other than a missing file or permissions.

    Also covers paths that open but are not regular files (directories,
    devices, sockets).
    """

    reason = "cannot open file"


class ReadFailureError(HashError):
    """An I/O error interrupted the stream; no partial digest exists."""

    reason = "read failed"


__all__ = [
    "AccessDeniedError",
    "HashError",
    "NotFoundError",
    "OpenError",
    "OtherOpenFailureError",
    "ReadFailureError",
]
