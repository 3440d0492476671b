"""Pull-based chunk pipeline.

Each stage is an async iterator that pulls exactly one chunk from the stage
before it per chunk it yields, so a slow response sink slows the whole
chain down to the file read without any intermediate buffering.

    source (file stream) -> transform_chunks -> PrimedStream -> response sink
"""

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing

from file_serving.exceptions import StreamAbortedError
from file_serving.protocols import ChunkTransform

logger = logging.getLogger(__name__)


def uppercase(chunk: str) -> str:
    """Default chunk transform."""
    return chunk.upper()


async def transform_chunks(
    source: AsyncIterator[str],
    transform: ChunkTransform,
) -> AsyncIterator[str]:
    """Apply a per-chunk transform, closing the source when done.

    Args:
        source: Upstream chunk iterator
        transform: Pure per-chunk function

    Yields:
        Transformed chunks in source order
    """
    async with aclosing(source):
        async for chunk in source:
            yield transform(chunk)


class PrimedStream:
    """A chunk stream whose first chunk has already been pulled.

    Pulling the first chunk before the response starts moves open and
    first-read failures to a point where a 500 can still be sent. Failures
    after that are logged and re-raised as StreamAbortedError, since the
    status line has already gone out.

    Example:
        ```python
        try:
            stream = await PrimedStream.prime(chunks)
        except BackingFileReadError:
            return PlainTextResponse("Server error", status_code=500)
        return ClosingStreamingResponse(stream, media_type="text/plain")
        ```
    """

    def __init__(self, first: str | None, rest: AsyncIterator[str]) -> None:
        self._first = first
        self._rest = rest
        self._sent = 0

    @classmethod
    async def prime(cls, source: AsyncIterator[str]) -> "PrimedStream":
        """Pull the first chunk from a source.

        Args:
            source: Chunk iterator; closed here if the first pull fails

        Returns:
            PrimedStream holding the first chunk (None for an empty source)

        Raises:
            Exception: Whatever the first pull raised
        """
        try:
            first = await anext(source)
        except StopAsyncIteration:
            first = None
        except BaseException:
            await source.aclose()
            raise
        return cls(first, source)

    def __aiter__(self) -> "PrimedStream":
        return self

    async def __anext__(self) -> str:
        if self._first is not None:
            chunk, self._first = self._first, None
        else:
            try:
                chunk = await anext(self._rest)
            except StopAsyncIteration:
                raise
            except Exception as e:
                logger.exception("Stream failed after %d chunks, aborting response", self._sent)
                raise StreamAbortedError(str(e)) from e
        self._sent += 1
        return chunk

    async def aclose(self) -> None:
        """Release the underlying source. Safe to call more than once."""
        self._first = None
        await self._rest.aclose()

    @property
    def chunks_sent(self) -> int:
        """Number of chunks handed to the consumer so far."""
        return self._sent
