"""Exception types raised by scan validation and directory listing.

Errors below the scanned root never surface here: unreadable child metadata
drops the child and a failing subtree walk reports size ``0``.
"""

from __future__ import annotations

from pathlib import Path


class DirSizerError(Exception):
    """Base class for errors reported to front ends."""


class RequestValidationError(DirSizerError, ValueError):
    """Scan parameters were rejected before touching the filesystem."""


class MissingRootParameter(RequestValidationError):
    def __init__(self) -> None:
        super().__init__("root directory is not specified (root)")


class InvalidSortDirection(RequestValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(f"invalid sort type {value!r}; use 'asc' or 'desc'")
        self.value = value


class DirectoryReadError(DirSizerError):
    """The scanned root could not be listed."""

    def __init__(self, path: Path, reason: OSError) -> None:
        detail = reason.strerror or str(reason)
        super().__init__(f"{path}: {detail}")
        self.path = path
        self.reason = reason


__all__ = [
    "DirSizerError",
    "RequestValidationError",
    "MissingRootParameter",
    "InvalidSortDirection",
    "DirectoryReadError",
]
