"""Storage error taxonomy.

Timer operations never raise; only the preset file can fail, and each
failure is reported once to the immediate caller.
"""

from __future__ import annotations

from pathlib import Path


class StorageError(Exception):
    """Base class for preset storage failures."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class StorageReadError(StorageError):
    """The persisted catalogue exists but is unreadable or malformed."""


class StorageWriteError(StorageError):
    """Writing the catalogue failed (disk full, permission denied, ...)."""
