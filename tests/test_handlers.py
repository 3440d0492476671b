"""
Tests for the HTTP handlers and the closing streaming response.
"""

import anyio
import pytest
from conftest import FakeFileStore
from starlette.requests import ClientDisconnect

from file_serving.exceptions import StreamAbortedError
from file_serving.handlers import ClosingStreamingResponse, FileHandler
from file_serving.services import BufferCacheService, StreamService

pytestmark = pytest.mark.anyio

# Send failures surface directly instead of through a disconnect listener
ASGI_2_4_SCOPE = {"type": "http", "asgi": {"spec_version": "2.4"}}


def make_handler(store, buffer_path, stream_path, large_stream_count=3) -> FileHandler:
    return FileHandler(
        buffer_cache=BufferCacheService.create(repository=store, path=buffer_path),
        stream_service=StreamService.create(repository=store, path=stream_path, chunk_size=4),
        large_stream_count=large_stream_count,
    )


async def test_serve_buffer(buffer_path, stream_path):
    """Test a cached buffer response."""
    store = FakeFileStore(files={buffer_path: b"hello"})
    handler = make_handler(store, buffer_path, stream_path)

    response = await handler.serve_buffer()
    assert response.status_code == 200
    assert response.body == b"hello"
    assert response.headers["content-type"] == "text/plain"


async def test_serve_buffer_not_found(buffer_path, stream_path):
    """Test a missing buffer file gives a 404."""
    handler = make_handler(FakeFileStore(), buffer_path, stream_path)

    response = await handler.serve_buffer()
    assert response.status_code == 404
    assert response.body == b"File not found"


async def test_serve_buffer_read_error(buffer_path, stream_path):
    """Test a read failure gives a generic 500."""
    store = FakeFileStore(files={buffer_path: b"hello"}, fail_read=True)
    handler = make_handler(store, buffer_path, stream_path)

    response = await handler.serve_buffer()
    assert response.status_code == 500
    assert response.body == b"Server error"


async def test_serve_stream_not_found(buffer_path, stream_path):
    """Test a missing stream file gives a 404 and opens nothing."""
    store = FakeFileStore(chunks=["abc"])
    handler = make_handler(store, buffer_path, stream_path)

    response = await handler.serve_stream()
    assert response.status_code == 404
    assert response.body == b"File not found"
    assert store.streams_opened == 0


async def test_serve_stream_first_chunk_error(buffer_path, stream_path):
    """Test a failure before any byte is sent gives a 500."""
    store = FakeFileStore(files={stream_path: b""}, chunks=["abc"], fail_at_chunk=0)
    handler = make_handler(store, buffer_path, stream_path)

    response = await handler.serve_stream()
    assert response.status_code == 500
    assert response.body == b"Server error"
    assert store.streams_closed == 1


async def test_serve_stream_returns_streaming_response(buffer_path, stream_path):
    """Test a present stream file gives a streaming text response."""
    store = FakeFileStore(files={stream_path: b""}, chunks=["abc"])
    handler = make_handler(store, buffer_path, stream_path)

    response = await handler.serve_stream()
    assert isinstance(response, ClosingStreamingResponse)
    assert response.status_code == 200
    assert response.media_type == "text/plain"


async def test_serve_large_stream(buffer_path, stream_path):
    """Test the synthetic stream response."""
    handler = make_handler(FakeFileStore(), buffer_path, stream_path)

    response = await handler.serve_large_stream()
    assert isinstance(response, ClosingStreamingResponse)
    chunks = [chunk async for chunk in response.body_iterator]
    assert chunks == [
        "This is chunk number 0\n",
        "This is chunk number 1\n",
        "This is chunk number 2\n",
    ]


async def test_health_check(buffer_path, stream_path):
    """Test health reports each backing file."""
    store = FakeFileStore(files={buffer_path: b"hello"})
    handler = make_handler(store, buffer_path, stream_path)

    health = await handler.health_check()
    assert health.status == "degraded"
    assert health.buffer_file_present is True
    assert health.stream_file_present is False
    assert health.buffer_cached is False


async def test_closing_response_headers_before_body(buffer_path, stream_path):
    """Test the content type goes out before the first body byte."""
    store = FakeFileStore(files={stream_path: b""}, chunks=["ab", "cd"])
    handler = make_handler(store, buffer_path, stream_path)
    response = await handler.serve_stream()
    messages = []

    async def receive() -> dict:
        await anyio.sleep_forever()

    async def send(message: dict) -> None:
        messages.append(message)

    await response({"type": "http"}, receive, send)

    assert messages[0]["type"] == "http.response.start"
    assert (b"content-type", b"text/plain; charset=utf-8") in messages[0]["headers"]
    body = b"".join(m.get("body", b"") for m in messages[1:])
    assert body == b"ABCD"
    assert store.streams_closed == 1


async def test_closing_response_releases_on_send_failure(buffer_path, stream_path):
    """Test the file stream is closed when the client goes away mid-stream."""
    store = FakeFileStore(files={stream_path: b""}, chunks=["a", "b", "c", "d"])
    handler = make_handler(store, buffer_path, stream_path)
    response = await handler.serve_stream()
    body_messages = 0

    async def receive() -> dict:
        await anyio.sleep_forever()

    async def send(message: dict) -> None:
        nonlocal body_messages
        if message["type"] == "http.response.body":
            body_messages += 1
            if body_messages == 2:
                raise OSError("connection reset")

    with pytest.raises(ClientDisconnect):
        await response(ASGI_2_4_SCOPE, receive, send)

    assert body_messages == 2
    assert store.streams_closed == 1


async def test_closing_response_aborts_after_first_chunk(buffer_path, stream_path):
    """Test a read failure after bytes went out aborts without a clean end."""
    store = FakeFileStore(files={stream_path: b""}, chunks=["ab", "cd", "ef"], fail_at_chunk=2)
    handler = make_handler(store, buffer_path, stream_path)
    response = await handler.serve_stream()
    messages = []

    async def receive() -> dict:
        await anyio.sleep_forever()

    async def send(message: dict) -> None:
        messages.append(message)

    with pytest.raises(StreamAbortedError):
        await response(ASGI_2_4_SCOPE, receive, send)

    assert messages[0]["type"] == "http.response.start"
    assert messages[0]["status"] == 200
    bodies = messages[1:]
    assert [m["body"] for m in bodies] == [b"AB", b"CD"]
    assert all(m["more_body"] is True for m in bodies)
    assert store.streams_closed == 1
