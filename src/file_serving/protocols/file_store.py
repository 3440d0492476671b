"""Filesystem collaborator protocol.

Defines the three operations the handlers need from the filesystem:
an existence check, a whole-file read and a chunked read stream.
"""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileStore(Protocol):
    """Protocol for backing file access.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from file_serving.protocols import FileStore

        store: FileStore = LocalFileRepository()
        if await store.exists(path):
            data = await store.read_all(path)
        ```
    """

    async def exists(self, path: Path) -> bool:
        """Check whether a file exists.

        Args:
            path: The file to check

        Returns:
            True if the file exists, False otherwise
        """
        ...

    async def read_all(self, path: Path) -> bytes:
        """Read a whole file into memory.

        Args:
            path: The file to read

        Returns:
            The file content as bytes

        Raises:
            BackingFileReadError: If the file cannot be read
        """
        ...

    def open_stream(self, path: Path, chunk_size: int) -> AsyncIterator[str]:
        """Open a lazy, forward-only text stream over a file.

        The file is opened on the first pull, so open failures surface
        from the first ``__anext__`` call. Closing the iterator closes the file.

        Args:
            path: The file to stream
            chunk_size: Maximum characters per chunk

        Returns:
            Async iterator of text chunks in file order

        Raises:
            BackingFileReadError: If opening or reading the file fails
        """
        ...
