from fastapi import FastAPI
from fastapi.responses import Response

from file_serving import __version__
from file_serving.api.dependencies import HandlerDep, lifespan
from file_serving.config import Settings, configure_logging, settings
from file_serving.dto import HealthCheckResponse, ServiceInfoResponse

DESCRIPTION = "File serving demo: buffered, stream-transformed and synthetic streamed responses"


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings: Settings to serve with. Defaults to the global settings.

    Returns:
        Configured FastAPI app; services are created by its lifespan
    """
    app = FastAPI(
        title="File Serving Demo",
        description=DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings or settings

    @app.get("/", response_model=ServiceInfoResponse)
    async def root() -> ServiceInfoResponse:
        """Root endpoint with API information."""
        return ServiceInfoResponse(
            name="File Serving Demo",
            version=__version__,
            description=DESCRIPTION,
            endpoints={
                "buffer": "/buffer",
                "stream": "/stream",
                "large_stream": "/large-stream",
                "health": "/health",
                "docs": "/docs",
            },
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/buffer", response_class=Response)
    async def buffer(handler: HandlerDep) -> Response:
        """Serve the buffer file from the in-memory cache."""
        return await handler.serve_buffer()

    @app.get("/stream", response_class=Response)
    async def stream(handler: HandlerDep) -> Response:
        """Stream the stream file, uppercased chunk by chunk."""
        return await handler.serve_stream()

    @app.get("/large-stream", response_class=Response)
    async def large_stream(handler: HandlerDep) -> Response:
        """Stream generated lines without a backing file."""
        return await handler.serve_large_stream()

    return app


app = create_app()


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "file_serving.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
