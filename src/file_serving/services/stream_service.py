"""Streaming transform service.

Builds the file -> transform pipeline for GET /stream.
"""

from pathlib import Path

from file_serving.exceptions import BackingFileNotFoundError
from file_serving.protocols import ChunkTransform, FileStore

from .pipeline import PrimedStream, transform_chunks, uppercase


class StreamService:
    """Opens a transformed, primed chunk stream over one backing file.

    Nothing is cached between requests; every call opens a fresh stream.
    """

    def __init__(
        self,
        repository: FileStore,
        path: Path,
        chunk_size: int,
        transform: ChunkTransform = uppercase,
    ) -> None:
        """Initialize the stream service.

        Args:
            repository: Filesystem collaborator (required).
            path: The backing file to stream (required).
            chunk_size: Maximum characters per chunk read.
            transform: Per-chunk transform. Defaults to uppercase.
        """
        self._repository = repository
        self._path = path
        self._chunk_size = chunk_size
        self._transform = transform

    @classmethod
    def create(
        cls,
        repository: FileStore,
        path: Path,
        chunk_size: int,
        transform: ChunkTransform = uppercase,
    ) -> "StreamService":
        """Factory method to create StreamService."""
        return cls(
            repository=repository,
            path=path,
            chunk_size=chunk_size,
            transform=transform,
        )

    async def open(self) -> PrimedStream:
        """Open the pipeline and pull its first chunk.

        Returns:
            PrimedStream ready to hand to the response

        Raises:
            BackingFileNotFoundError: If the file does not exist (nothing opened)
            BackingFileReadError: If opening or the first read fails
        """
        if not await self._repository.exists(self._path):
            raise BackingFileNotFoundError(self._path)

        source = self._repository.open_stream(self._path, self._chunk_size)
        return await PrimedStream.prime(transform_chunks(source, self._transform))

    @property
    def path(self) -> Path:
        """Get the backing file path."""
        return self._path
