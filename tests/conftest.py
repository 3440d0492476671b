"""
pytest configuration and fixtures.
"""

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import anyio
import pytest
from fastapi.testclient import TestClient

from file_serving.api.app import create_app
from file_serving.config import Settings
from file_serving.exceptions import BackingFileReadError


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def files_dir(tmp_path: Path) -> Path:
    """Directory with both backing files present."""
    (tmp_path / "buffer.txt").write_bytes(b"hello")
    (tmp_path / "stream.txt").write_bytes(b"abc\ndef")
    return tmp_path


@pytest.fixture
def app_settings(files_dir: Path) -> Settings:
    """Settings pointing at the temporary backing files."""
    return Settings(files_dir=files_dir)


@pytest.fixture
def client(app_settings: Settings) -> Iterator[TestClient]:
    """Create a test client with the lifespan running."""
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client


class FakeFileStore:
    """In-memory FileStore that records how it is used."""

    def __init__(
        self,
        files: dict[Path, bytes] | None = None,
        chunks: list[str] | None = None,
        fail_read: bool = False,
        fail_at_chunk: int | None = None,
    ) -> None:
        self.files = files or {}
        self.chunks = chunks or []
        self.fail_read = fail_read
        self.fail_at_chunk = fail_at_chunk
        self.exists_calls = 0
        self.read_calls = 0
        self.streams_opened = 0
        self.streams_closed = 0

    async def exists(self, path: Path) -> bool:
        self.exists_calls += 1
        return path in self.files

    async def read_all(self, path: Path) -> bytes:
        self.read_calls += 1
        # Suspend so concurrent callers interleave like real file reads
        await anyio.sleep(0)
        if self.fail_read:
            raise BackingFileReadError(path, "disk fault")
        return self.files[path]

    async def open_stream(self, path: Path, chunk_size: int) -> AsyncIterator[str]:
        self.streams_opened += 1
        try:
            for index, chunk in enumerate(self.chunks):
                if index == self.fail_at_chunk:
                    raise BackingFileReadError(path, "disk fault")
                yield chunk
        finally:
            self.streams_closed += 1


@pytest.fixture
def buffer_path() -> Path:
    return Path("/data/buffer.txt")


@pytest.fixture
def stream_path() -> Path:
    return Path("/data/stream.txt")
