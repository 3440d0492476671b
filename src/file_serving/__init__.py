"""File Serving Demo - three ways to deliver a file over HTTP.

This package provides a layered architecture for file delivery:

Layers:
    - protocols: Interface contracts (FileStore, ChunkTransform)
    - repositories: Filesystem access
    - services: Buffer cache, chunk pipeline, synthetic generator
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Endpoints:
    - GET /buffer: whole file from an in-memory cache, read once
    - GET /stream: file streamed and uppercased chunk by chunk
    - GET /large-stream: 10,000 generated lines, streamed

Usage:
    ```python
    from file_serving.api.app import app, create_app
    ```
"""

__version__ = "0.1.0"

from file_serving.config import get_settings, settings  # noqa: E402
from file_serving.entities import CachedBufferEntity  # noqa: E402
from file_serving.exceptions import (  # noqa: E402
    BackingFileNotFoundError,
    BackingFileReadError,
    FileServingError,
    StreamAbortedError,
)
from file_serving.handlers import FileHandler  # noqa: E402
from file_serving.protocols import ChunkTransform, FileStore  # noqa: E402
from file_serving.repositories import LocalFileRepository  # noqa: E402
from file_serving.services import BufferCacheService, StreamService  # noqa: E402

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "ChunkTransform",
    "FileStore",
    # Services
    "BufferCacheService",
    "StreamService",
    # Handlers (HTTP)
    "FileHandler",
    # Repositories (filesystem access)
    "LocalFileRepository",
    # Entities (domain models)
    "CachedBufferEntity",
    # Errors
    "FileServingError",
    "BackingFileNotFoundError",
    "BackingFileReadError",
    "StreamAbortedError",
]
