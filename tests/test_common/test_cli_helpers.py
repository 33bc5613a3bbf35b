"""Tests for sorting.common.cli_helpers module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from sorting.common.cli_helpers import open_input, open_output
from sorting.common.exceptions import FileOperationError


def test_open_input_file(tmp_path: Path):
    """Test reading a file and closing it afterwards."""
    src = tmp_path / "in.txt"
    src.write_text("hello\n", encoding="utf-8")

    with open_input(src) as f:
        assert f.read() == "hello\n"

    assert f.closed


def test_open_input_stdin(stdin_text):
    """Test that no path means standard input, left open."""
    stdin_text("from stdin")

    with open_input() as f:
        assert f is sys.stdin
        assert f.read() == "from stdin"

    assert not sys.stdin.closed


def test_open_input_missing(tmp_path: Path):
    """Test that a missing input file raises FileOperationError."""
    with pytest.raises(FileOperationError, match="missing.txt"):
        with open_input(tmp_path / "missing.txt"):
            pass


def test_open_output_file(tmp_path: Path):
    """Test writing a file and closing it afterwards."""
    target = tmp_path / "out.txt"

    with open_output(target) as f:
        f.write("report\n")

    assert f.closed
    assert target.read_text(encoding="utf-8") == "report\n"


def test_open_output_stdout(capsys: pytest.CaptureFixture[str]):
    """Test that no path means standard output."""
    with open_output() as f:
        f.write("report\n")

    assert capsys.readouterr().out == "report\n"


def test_open_output_bad_directory(tmp_path: Path):
    """Test that an unopenable output raises FileOperationError."""
    with pytest.raises(FileOperationError):
        with open_output(tmp_path / "nope" / "out.txt"):
            pass


def test_open_input_replaces_undecodable_bytes(tmp_path: Path):
    """Test that invalid UTF-8 is read with replacement characters."""
    src = tmp_path / "latin1.txt"
    src.write_bytes(b"caf\xe9\n")

    with open_input(src) as f:
        assert f.read() == "caf\ufffd\n"
