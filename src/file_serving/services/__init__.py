"""Service layer for the three delivery strategies.

Services depend on protocols (FileStore, ChunkTransform), not concrete
implementations, which keeps them testable with in-memory fakes.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Delivery) -> (Filesystem)

Usage:
    ```python
    from file_serving.repositories import LocalFileRepository
    from file_serving.services import BufferCacheService, StreamService

    repository = LocalFileRepository.create()
    buffer_cache = BufferCacheService.create(repository=repository, path=path)
    entity = await buffer_cache.get_or_populate()
    ```
"""

from .buffer_cache_service import BufferCacheService
from .pipeline import PrimedStream, transform_chunks, uppercase
from .stream_service import StreamService
from .synthetic import chunk_line, generate_lines

__all__ = [
    "BufferCacheService",
    "PrimedStream",
    "StreamService",
    "chunk_line",
    "generate_lines",
    "transform_chunks",
    "uppercase",
]
