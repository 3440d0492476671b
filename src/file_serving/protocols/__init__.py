"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the filesystem collaborator (local disk, in-memory fakes for tests)
- Swapping the per-chunk transformation applied by the streaming pipeline

Usage:
    ```python
    from file_serving.protocols import ChunkTransform, FileStore

    store: FileStore = LocalFileRepository()
    transform: ChunkTransform = str.upper
    ```
"""

from .chunk_transform import ChunkTransform
from .file_store import FileStore

__all__ = [
    "ChunkTransform",
    "FileStore",
]
