"""Command-line entry points for hashcheck."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from hashcheck.config import ConfigError, HashCheckConfig, dump_example_config, load_config
from hashcheck.digest import hash_file
from hashcheck.errors import (
    AccessDeniedError,
    HashError,
    NotFoundError,
    OtherOpenFailureError,
    ReadFailureError,
)
from hashcheck.util.logging import configure_logging
from hashcheck.util.manifest import ManifestError, manifest_path_for, read_manifest, write_manifest
from hashcheck.verify import InvalidDigestError, verify_file

app = typer.Typer(add_completion=False, help="SHA-256 file fingerprints and integrity checks")

EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2
EXIT_MANIFEST_WRITE = 8

# Most specific first; OpenError subclasses before the HashError catch-all.
_EXIT_CODES: tuple[tuple[type[HashError], int], ...] = (
    (NotFoundError, 3),
    (AccessDeniedError, 4),
    (OtherOpenFailureError, 5),
    (ReadFailureError, 6),
    (HashError, 7),
)

CONFIG_OPTION = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Emit debug traces on stderr")


def _prepare(config_path: Optional[Path], verbose: bool) -> tuple[HashCheckConfig, logging.Logger]:
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc

    level = "DEBUG" if verbose else cfg.logging.level
    logger = configure_logging(level=level, log_path=cfg.logging.log_path)
    return cfg, logger


def _fail(exc: HashError) -> typer.Exit:
    typer.echo(f"error: {exc}", err=True)
    for kind, code in _EXIT_CODES:
        if isinstance(exc, kind):
            return typer.Exit(code=code)
    return typer.Exit(code=EXIT_BAD_INPUT)  # pragma: no cover - HashError always matches


@app.command("hash")
def hash_command(
    path: Path = typer.Argument(..., help="File to fingerprint"),
    write: bool = typer.Option(False, "--write-manifest", help="Store the digest in a sidecar file"),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the SHA-256 digest of PATH."""

    cfg, logger = _prepare(config, verbose)
    try:
        digest = hash_file(path, chunk_size=cfg.hashing.chunk_size, logger=logger)
    except HashError as exc:
        raise _fail(exc) from exc

    typer.echo(digest)
    if write:
        try:
            dest = write_manifest(path, digest, extension=cfg.hashing.manifest_extension)
        except OSError as exc:
            typer.echo(f"error: cannot write manifest for {path}: {exc}", err=True)
            raise typer.Exit(code=EXIT_MANIFEST_WRITE) from exc
        logger.info("Wrote manifest %s", dest)


@app.command()
def check(
    path: Path = typer.Argument(..., help="File to verify"),
    expected: Optional[str] = typer.Argument(None, help="Known-good SHA-256 hex digest"),
    manifest: Optional[Path] = typer.Option(None, "--manifest", "-m", help="Read the expected digest from this file"),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Verify PATH against EXPECTED, a manifest file, or its sidecar manifest."""

    cfg, logger = _prepare(config, verbose)

    if expected is not None and manifest is not None:
        typer.echo("error: pass either EXPECTED or --manifest, not both", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT)

    if expected is None:
        source = manifest or manifest_path_for(path, extension=cfg.hashing.manifest_extension)
        try:
            expected = read_manifest(source)
        except ManifestError as exc:
            typer.echo(f"error: {exc}", err=True)
            raise typer.Exit(code=EXIT_BAD_INPUT) from exc
        logger.debug("Expected digest for %s taken from %s", path, source)

    try:
        result = verify_file(path, expected, chunk_size=cfg.hashing.chunk_size, logger=logger)
    except InvalidDigestError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc
    except HashError as exc:
        raise _fail(exc) from exc

    if not result.matched:
        typer.echo(f"MISMATCH {path}")
        typer.echo(f"  expected {result.expected}")
        typer.echo(f"  actual   {result.actual}")
        raise typer.Exit(code=EXIT_MISMATCH)
    typer.echo(f"OK {path}")


@app.command("dump-config")
def dump_config(
    dest: Path = typer.Argument(..., help="Destination .yaml or .json file"),
) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
