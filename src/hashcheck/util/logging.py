"""Logging setup for the hashcheck command line."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path


def configure_logging(*, level: str | int = "WARNING", log_path: Path | None = None) -> logging.Logger:
    """Configure the ``hashcheck`` logger.

    Console output goes to stderr so stdout carries only digests. Repeated
    calls keep one console handler bound to the current ``sys.stderr``;
    handlers left on a replaced stream are dropped without flushing it.
    """

    logger = logging.getLogger("hashcheck")
    logger.setLevel(level)

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    has_stream = False
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.StreamHandler) or isinstance(handler, logging.FileHandler):
            continue
        if handler.stream is sys.stderr and not getattr(handler.stream, "closed", False):
            has_stream = True
        else:
            logger.removeHandler(handler)
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    if not has_stream:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
