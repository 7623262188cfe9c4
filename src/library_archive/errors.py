"""Exceptions raised by library-archive."""

from pathlib import Path


class PersistenceError(Exception):
    """Saving or loading an archive file failed."""

    def __init__(self, operation: str, path: Path, cause: Exception | str):
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to {operation} archive {path}: {cause}")


class MalformedArchiveError(PersistenceError):
    """The archive file opened but does not hold a valid item sequence."""
