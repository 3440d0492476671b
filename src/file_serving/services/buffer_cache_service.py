"""Buffer cache service.

Memoizes a single backing file in memory for the lifetime of the service
instance. The app lifespan creates one instance, so under uvicorn the cache
lives as long as the process; a new lifespan starts with an empty cache.
The first successful read populates the cache; every later call is a pure
read of that state.
"""

import logging
import time
from pathlib import Path

from file_serving.entities import CachedBufferEntity
from file_serving.exceptions import BackingFileNotFoundError
from file_serving.protocols import FileStore

logger = logging.getLogger(__name__)


class BufferCacheService:
    """Get-or-populate cache for one backing file.

    Populating is not guarded by a lock. Concurrent first requests may each
    read the file, but only the first result is stored; the others return
    the stored entity and discard their own read. Once stored, the entity
    is never replaced.

    Example:
        ```python
        service = BufferCacheService.create(
            repository=LocalFileRepository.create(),
            path=settings.buffer_file_path,
        )
        entity = await service.get_or_populate()
        ```
    """

    def __init__(self, repository: FileStore, path: Path) -> None:
        """Initialize the buffer cache.

        Args:
            repository: Filesystem collaborator (required).
            path: The backing file to memoize (required).
        """
        self._repository = repository
        self._path = path
        self._buffer: CachedBufferEntity | None = None

    @classmethod
    def create(cls, repository: FileStore, path: Path) -> "BufferCacheService":
        """Factory method to create BufferCacheService.

        Args:
            repository: Filesystem collaborator (required).
            path: The backing file to memoize (required).

        Returns:
            Configured BufferCacheService instance with an empty cache
        """
        return cls(repository=repository, path=path)

    async def get_or_populate(self) -> CachedBufferEntity:
        """Return the cached file, reading it on first use.

        Business logic:
        1. Return the cached entity if present (no filesystem access)
        2. Otherwise check the file exists
        3. Read it fully and store it, unless another call stored it first

        Returns:
            The cached buffer entity

        Raises:
            BackingFileNotFoundError: If the file does not exist (cache untouched)
            BackingFileReadError: If the file exists but cannot be read
        """
        if self._buffer is not None:
            return self._buffer

        if not await self._repository.exists(self._path):
            raise BackingFileNotFoundError(self._path)

        content = await self._repository.read_all(self._path)

        if self._buffer is None:
            self._buffer = CachedBufferEntity(
                content=content,
                source=self._path,
                loaded_at=time.time(),
            )
            logger.info("Cached %s (%d bytes)", self._path, self._buffer.size)
        else:
            logger.debug("Discarding redundant read of %s", self._path)

        return self._buffer

    @property
    def is_populated(self) -> bool:
        """Whether the cache holds the file content."""
        return self._buffer is not None

    @property
    def path(self) -> Path:
        """Get the backing file path."""
        return self._path

    @property
    def repository(self) -> FileStore:
        """Get the underlying repository (for testing)."""
        return self._repository
