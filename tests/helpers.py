from __future__ import annotations

import hashlib
from pathlib import Path

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
HEX_CHARS = set("0123456789abcdef")


def write_bytes(directory: Path, name: str, payload: bytes) -> Path:
    """Write `payload` to ``directory/name`` and return the path."""

    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    return path


def reference_digest(payload: bytes) -> str:
    """Digest `payload` in one call, bypassing any streaming."""

    return hashlib.sha256(payload).hexdigest()


class FailingReader:
    """Wrap a binary handle so that reads fail after `ok_reads` successful calls."""

    def __init__(self, handle, ok_reads: int) -> None:
        self._handle = handle
        self._ok_reads = ok_reads
        self.read_calls = 0

    def read(self, size: int = -1) -> bytes:
        self.read_calls += 1
        if self.read_calls > self._ok_reads:
            raise OSError(5, "Input/output error")
        return self._handle.read(size)

    def fileno(self) -> int:
        return self._handle.fileno()

    def close(self) -> None:
        self._handle.close()

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __enter__(self) -> "FailingReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
