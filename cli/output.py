"""Routing the extracted text to stdout or to a file."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

_logger = logging.getLogger(__name__)


def write_text(path: str | Path, text: str) -> Path:
    """Create or overwrite *path* with *text* (UTF-8)."""
    target = Path(path)
    target.write_text(text, encoding="utf-8")
    return target


def route_output(
    text: str,
    path: str | None = None,
    logger: logging.Logger | None = None,
) -> bool:
    """Print *text*, or write it to *path* and report the outcome.

    Returns ``False`` only when writing the file failed.
    """
    log = logger or _logger
    if not path:
        typer.echo(text)
        return True

    try:
        write_text(path, text)
    except OSError as exc:
        typer.echo(f"Failed to write text to '{path}'")
        log.error("Writing %s failed: %s", path, exc)
        return False

    typer.echo(f"Text successfully written to '{path}'")
    return True
