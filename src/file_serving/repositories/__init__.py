"""Repository layer for data access.

This layer wraps the filesystem behind the FileStore protocol so services
never touch paths or file handles directly.
"""

from file_serving.protocols import FileStore

from .local_file_repository import LocalFileRepository

__all__ = [
    "FileStore",
    "LocalFileRepository",
]
