"""Handler layer for HTTP endpoints.

Handlers depend on services, not directly on repositories, and own every
HTTP concern: status codes, response classes and error translation.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Delivery) -> (Filesystem)
"""

from .file_handler import FileHandler
from .responses import ClosingStreamingResponse

__all__ = [
    "ClosingStreamingResponse",
    "FileHandler",
]
