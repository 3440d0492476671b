"""Cached buffer domain entity."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CachedBufferEntity:
    """Domain entity for a memoized file body.

    Attributes:
        content: The full file content as bytes
        source: The file the content was read from
        loaded_at: When the content was read (Unix timestamp)
    """

    content: bytes
    source: Path
    loaded_at: float

    @property
    def size(self) -> int:
        """Size of the content in bytes."""
        return len(self.content)
