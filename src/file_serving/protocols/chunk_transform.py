"""Per-chunk transformation protocol."""

from typing import Protocol


class ChunkTransform(Protocol):
    """A pure, stateless, order-preserving map over text chunks.

    The output for a chunk must depend on that chunk only, so the
    concatenation of transformed chunks does not depend on where the
    source happened to split them.
    """

    def __call__(self, chunk: str, /) -> str:
        ...
