"""Sidecar fingerprint files stored next to the file they describe."""

from __future__ import annotations

import os
from pathlib import Path

from hashcheck.verify import InvalidDigestError, normalize_digest

DEFAULT_MANIFEST_EXTENSION = ".sha256"


class ManifestError(RuntimeError):
    """Raised when a sidecar manifest is missing or unreadable."""


def manifest_path_for(path: str | os.PathLike[str], *, extension: str = DEFAULT_MANIFEST_EXTENSION) -> Path:
    """Return ``<path><extension>``, e.g. ``build.tar.gz.sha256``."""
    target = Path(path)
    return target.with_name(target.name + extension)


def write_manifest(
    path: str | os.PathLike[str], digest: str, *, extension: str = DEFAULT_MANIFEST_EXTENSION
) -> Path:
    """Store `digest` beside `path` and return the manifest location."""

    dest = manifest_path_for(path, extension=extension)
    dest.write_text(normalize_digest(digest), encoding="utf-8")
    return dest


def read_manifest(manifest_path: str | os.PathLike[str]) -> str:
    """Return the digest recorded in `manifest_path`.

    Accepts a bare digest or the ``sha256sum`` line format
    (``<digest>  <name>`` or ``<digest> *<name>``); only the first line is used.
    """

    source = Path(manifest_path)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest {source} does not exist.") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Manifest {source} could not be read: {exc}") from exc

    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ManifestError(f"Manifest {source} is empty.")

    token = lines[0].split()[0]
    try:
        return normalize_digest(token)
    except InvalidDigestError as exc:
        raise ManifestError(f"Manifest {source} does not hold a SHA-256 digest.") from exc


__all__ = ["DEFAULT_MANIFEST_EXTENSION", "ManifestError", "manifest_path_for", "read_manifest", "write_manifest"]
