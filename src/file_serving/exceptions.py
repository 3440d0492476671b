"""Error taxonomy for file serving.

Handlers translate these into HTTP responses locally; none of them are
meant to reach the router uncaught, except StreamAbortedError, which is the
way a response body tells the server to drop an already-started response.
"""

from pathlib import Path


class FileServingError(Exception):
    """Base class for file serving errors."""


class BackingFileNotFoundError(FileServingError):
    """The backing file does not exist. Detected before any read begins."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Backing file not found: {path}")
        self.path = path


class BackingFileReadError(FileServingError):
    """Reading the backing file failed (permission, I/O fault)."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path


class StreamAbortedError(FileServingError):
    """A streamed response failed after bytes were already sent."""
