"""Shared CLI utilities: logging setup and managed input/output streams."""

from __future__ import annotations

import io
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from sorting.common.exceptions import FileOperationError

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging so diagnostics go to standard output.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
    )


@contextmanager
def open_input(path: Optional[Path] = None) -> Iterator[TextIO]:
    """Open `path` for reading, or yield standard input when no path is given.

    Undecodable bytes are replaced with U+FFFD rather than raising.
    Standard input is never closed.

    Raises:
        FileOperationError: If the file cannot be opened
    """
    if path is None:
        logger.debug("Reading from standard input")
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        yield sys.stdin
        return

    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileOperationError(str(e)) from e
    logger.debug(f"Opened {path!s} for reading")
    try:
        yield f
    finally:
        f.close()
        logger.debug(f"Closed {path!s}")


@contextmanager
def open_output(path: Optional[Path] = None) -> Iterator[TextIO]:
    """Open `path` for writing, or yield standard output when no path is given.

    Standard output is flushed but never closed.

    Raises:
        FileOperationError: If the file cannot be opened
    """
    if path is None:
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise FileOperationError(str(e)) from e
    logger.debug(f"Opened {path!s} for writing")
    try:
        yield f
    finally:
        f.close()
        logger.debug(f"Closed {path!s}")
