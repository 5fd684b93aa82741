"""Exceptions and process exit codes for shamv."""

from __future__ import annotations

import os
from enum import IntEnum

import click


class ExitCode(IntEnum):
    """Process exit statuses reported by the CLI."""

    SUCCESS = 0
    INSUFFICIENT_ARGS = 1
    UNSUPPORTED_ALGORITHM = 2
    FILE_NOT_FOUND = 3
    DIGEST_ERROR = 4
    RENAME_ERROR = 5
    CONFIG_ERROR = 6
    UNEXPECTED_ERROR = 7


def display_path(path: str | os.PathLike[str]) -> str:
    """Return a printable rendering of a filesystem path.

    Bytes that do not decode under the filesystem encoding are replaced, so
    the result can always be written to a strict UTF-8 stream.
    """
    return click.format_filename(path)


class ShamvError(Exception):
    """Base exception for shamv failures that map to an exit code."""

    exit_code: ExitCode = ExitCode.UNEXPECTED_ERROR


class InsufficientArgumentsError(ShamvError):
    """Raised when no FILE operands are supplied."""

    exit_code = ExitCode.INSUFFICIENT_ARGS


class UnsupportedAlgorithmError(ShamvError):
    """Raised when an algorithm name does not match a supported digest."""

    exit_code = ExitCode.UNSUPPORTED_ALGORITHM

    def __init__(self, name: str) -> None:
        super().__init__(f"unsupported algorithm {name}")
        self.name = name


class MissingFileError(ShamvError):
    """Raised when a supplied path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(f"file not found {display_path(path)}")
        self.path = path


class DigestError(ShamvError):
    """Raised when an existing path cannot be opened or read for hashing."""

    exit_code = ExitCode.DIGEST_ERROR


class RenameError(ShamvError):
    """Raised when a hashed file cannot be moved to its destination."""

    exit_code = ExitCode.RENAME_ERROR


__all__ = [
    "ExitCode",
    "ShamvError",
    "display_path",
    "InsufficientArgumentsError",
    "UnsupportedAlgorithmError",
    "MissingFileError",
    "DigestError",
    "RenameError",
]
