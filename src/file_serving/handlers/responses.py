"""Response classes."""

from fastapi.responses import StreamingResponse
from starlette.types import Receive, Scope, Send


class ClosingStreamingResponse(StreamingResponse):
    """StreamingResponse that always closes its body iterator.

    Starlette stops iterating when the client disconnects or a send fails,
    but leaves the iterator suspended. Closing it here releases file
    handles and generator state as soon as the response ends, however it ends.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            aclose = getattr(self.body_iterator, "aclose", None)
            if aclose is not None:
                await aclose()
