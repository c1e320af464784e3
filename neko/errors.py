"""
Custom exception types used across neko.

Source errors are reported per input and never abort the whole run, so
they carry the display name of the source they belong to.
"""

from __future__ import annotations


class NekoError(Exception):
    """Base class for all neko specific errors."""


class SourceError(NekoError):
    """
    Raised when an input source cannot be processed.

    str(exc) renders as "<name>: <message>", which the CLI prefixes with
    the program name.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"{name}: {message}")
        self.name = name
        self.message = message


class SourceOpenError(SourceError):
    """Raised when a source does not exist or cannot be opened."""


class SourceReadError(SourceError):
    """Raised when reading a source fails part way through."""


def describe_os_error(exc: OSError) -> str:
    """Return the human readable part of an OSError, without the path."""

    return exc.strerror or str(exc)
