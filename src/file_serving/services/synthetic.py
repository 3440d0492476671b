"""Synthetic line generator for GET /large-stream."""

import logging
from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


def chunk_line(index: int) -> str:
    return f"This is chunk number {index}\n"


async def generate_lines(count: int) -> AsyncIterator[str]:
    """Yield ``count`` numbered lines, one per chunk, lazily.

    Args:
        count: Number of lines; indices run from 0 to count - 1

    Yields:
        Lines in strictly increasing index order
    """
    emitted = 0
    try:
        for index in range(count):
            yield chunk_line(index)
            emitted += 1
    finally:
        if emitted < count:
            logger.debug("Synthetic stream stopped after %d of %d lines", emitted, count)
