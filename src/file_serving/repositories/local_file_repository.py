"""Local disk implementation of FileStore.

All filesystem calls go through anyio so they run in a worker thread and
never block the event loop.
"""

import logging
from collections.abc import AsyncIterator
from pathlib import Path

import anyio

from file_serving.exceptions import BackingFileReadError

logger = logging.getLogger(__name__)


class LocalFileRepository:
    """Reads backing files from the local filesystem.

    This class satisfies the FileStore protocol through structural
    typing - no explicit inheritance needed.

    Streams are decoded incrementally with the configured encoding, so a
    multibyte character is never split across two chunks. Line endings are
    passed through untranslated and undecodable bytes become U+FFFD.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the repository.

        Args:
            encoding: Text encoding used by open_stream.
        """
        self._encoding = encoding

    @classmethod
    def create(cls, encoding: str = "utf-8") -> "LocalFileRepository":
        """Factory method to create LocalFileRepository with defaults."""
        return cls(encoding=encoding)

    async def exists(self, path: Path) -> bool:
        return await anyio.Path(path).is_file()

    async def read_all(self, path: Path) -> bytes:
        try:
            return await anyio.Path(path).read_bytes()
        except OSError as e:
            raise BackingFileReadError(path, str(e)) from e

    async def open_stream(self, path: Path, chunk_size: int) -> AsyncIterator[str]:
        try:
            file = await anyio.open_file(
                path, "r", encoding=self._encoding, errors="replace", newline=""
            )
        except OSError as e:
            raise BackingFileReadError(path, str(e)) from e

        logger.debug("Opened stream over %s", path)
        try:
            async with file:
                while True:
                    try:
                        chunk = await file.read(chunk_size)
                    except OSError as e:
                        raise BackingFileReadError(path, str(e)) from e
                    if not chunk:
                        break
                    yield chunk
        finally:
            logger.debug("Closed stream over %s", path)

    @property
    def encoding(self) -> str:
        """Get the text encoding used for streams."""
        return self._encoding
