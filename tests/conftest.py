"""Shared pytest fixtures for sorting tool tests."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def numbers_file(tmp_path: Path) -> Path:
    """Create a file of longs with one malformed token.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to the numbers file
    """
    file_path = tmp_path / "numbers.txt"
    file_path.write_text("4 -14 18\n-14 4 oops\n")
    return file_path


@pytest.fixture
def lines_file(tmp_path: Path) -> Path:
    """Create a file of lines, including a blank one.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to the lines file
    """
    file_path = tmp_path / "lines.txt"
    file_path.write_text("the quick fox\n\nthe quick fox\nA lazy dog\n")
    return file_path


@pytest.fixture
def stdin_text(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Return a helper that replaces standard input with the given text."""

    def _set(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _set
