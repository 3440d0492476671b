"""HTTP handlers for the three file endpoints.

Each handler catches its own failures and turns them into a response:
404 for a missing backing file, 500 for anything else that happens before
the first body byte. Clients only ever see the generic texts below; the
details go to the log.
"""

import logging

from fastapi import status
from fastapi.responses import PlainTextResponse, Response

from file_serving.dto import HealthCheckResponse
from file_serving.exceptions import BackingFileNotFoundError
from file_serving.services import BufferCacheService, StreamService, generate_lines

from .responses import ClosingStreamingResponse

logger = logging.getLogger(__name__)

MEDIA_TYPE = "text/plain"
NOT_FOUND_TEXT = "File not found"
SERVER_ERROR_TEXT = "Server error"


class FileHandler:
    """HTTP handlers for file delivery.

    This handler delegates delivery to the services and handles
    HTTP-specific concerns like:
    - Choosing between whole-body and streaming responses
    - Setting status codes and the content type
    - Logging failures without exposing them to clients

    Example:
        ```python
        handler = FileHandler(
            buffer_cache=buffer_cache,
            stream_service=stream_service,
            large_stream_count=10_000,
        )

        @app.get("/buffer")
        async def buffer():
            return await handler.serve_buffer()
        ```
    """

    def __init__(
        self,
        buffer_cache: BufferCacheService,
        stream_service: StreamService,
        large_stream_count: int,
    ) -> None:
        """Initialize the file handler.

        Args:
            buffer_cache: Memoized buffer for GET /buffer (required).
            stream_service: Transform pipeline for GET /stream (required).
            large_stream_count: Number of lines for GET /large-stream.
        """
        self._buffer_cache = buffer_cache
        self._stream_service = stream_service
        self._large_stream_count = large_stream_count

    async def serve_buffer(self) -> Response:
        """Handle GET /buffer requests.

        Returns:
            200 with the cached file body, 404 if the file is missing,
            500 if it could not be read
        """
        try:
            entity = await self._buffer_cache.get_or_populate()
        except BackingFileNotFoundError as e:
            logger.warning("%s", e)
            return _not_found()
        except Exception:
            logger.exception("Failed to serve %s", self._buffer_cache.path)
            return _server_error()

        # Opaque bytes: no charset is claimed
        return Response(content=entity.content, headers={"content-type": MEDIA_TYPE})

    async def serve_stream(self) -> Response:
        """Handle GET /stream requests.

        Returns:
            200 streaming the transformed file, 404 if the file is missing,
            500 if the stream failed before its first chunk
        """
        try:
            stream = await self._stream_service.open()
        except BackingFileNotFoundError as e:
            logger.warning("%s", e)
            return _not_found()
        except Exception:
            logger.exception("Failed to open stream over %s", self._stream_service.path)
            return _server_error()

        return ClosingStreamingResponse(stream, media_type=MEDIA_TYPE)

    async def serve_large_stream(self) -> Response:
        """Handle GET /large-stream requests.

        Returns:
            200 streaming the generated lines
        """
        return ClosingStreamingResponse(
            generate_lines(self._large_stream_count),
            media_type=MEDIA_TYPE,
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with backing file presence and cache state
        """
        repository = self._buffer_cache.repository
        buffer_present = await repository.exists(self._buffer_cache.path)
        stream_present = await repository.exists(self._stream_service.path)

        return HealthCheckResponse(
            status="healthy" if buffer_present and stream_present else "degraded",
            buffer_file_present=buffer_present,
            stream_file_present=stream_present,
            buffer_cached=self._buffer_cache.is_populated,
        )


def _not_found() -> Response:
    return PlainTextResponse(NOT_FOUND_TEXT, status_code=status.HTTP_404_NOT_FOUND)


def _server_error() -> Response:
    return PlainTextResponse(SERVER_ERROR_TEXT, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
