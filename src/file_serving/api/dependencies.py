"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Settings stored in app.state by create_app
    - Services built from those settings during lifespan
    - Dependency functions retrieve from request.app.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from file_serving.config import Settings, configure_logging
from file_serving.handlers import FileHandler
from file_serving.repositories import LocalFileRepository
from file_serving.services import BufferCacheService, StreamService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> FileHandler:
    """Dependency injection for FileHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The FileHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "file_handler", None)
    if handler is None:
        raise RuntimeError("FileHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository (filesystem access) - created explicitly
    2. Services (buffer cache, stream pipeline) - buffer cache lives for
       this lifespan, so its content survives across requests and is
       dropped on shutdown
    3. Handler (HTTP endpoints) - stored in app.state.file_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Removes all services from app.state on shutdown
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)

    repository = LocalFileRepository.create()

    buffer_cache = BufferCacheService.create(
        repository=repository,
        path=settings.buffer_file_path,
    )
    stream_service = StreamService.create(
        repository=repository,
        path=settings.stream_file_path,
        chunk_size=settings.stream_chunk_size,
    )
    file_handler = FileHandler(
        buffer_cache=buffer_cache,
        stream_service=stream_service,
        large_stream_count=settings.large_stream_count,
    )

    # Store in app.state (FastAPI pattern)
    app.state.repository = repository
    app.state.buffer_cache = buffer_cache
    app.state.stream_service = stream_service
    app.state.file_handler = file_handler

    logger.info("Serving files from %s", settings.files_dir)
    logger.info("Server is running on http://localhost:%d", settings.api_port)

    yield

    # Cleanup - remove from app.state
    del app.state.file_handler
    del app.state.stream_service
    del app.state.buffer_cache
    del app.state.repository
    logger.info("File server shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[FileHandler, Depends(get_handler)]