"""Shared exception classes for the sorting tool."""

from __future__ import annotations


class SortingToolError(Exception):
    """Base exception for all sorting tool errors."""

    pass


class UsageError(SortingToolError):
    """A recognized command-line flag was given without a value."""

    pass


class FileOperationError(SortingToolError):
    """Error opening the input or output stream."""

    pass


class MalformedItemError(SortingToolError, ValueError):
    """Input token cannot be parsed as an item of the selected kind."""

    def __init__(self, token: str, kind: str) -> None:
        super().__init__(f'"{token}" isn\'t a {kind}. It\'s skipped.')
        self.token = token
        self.kind = kind
