"""ASGI adapter — serves the responder over loopback HTTP.

For hosts that load the UI from ``http://127.0.0.1:<port>/`` instead of a
custom scheme. The only component that touches raw ASGI directly.
"""

import logging

import anyio.to_thread

from wren._internal.asgi import Receive, Scope, Send
from wren.errors import AssetReadError
from wren.http.request import Request
from wren.http.response import Response
from wren.responder import AssetResponder

logger = logging.getLogger("wren.server")


class AssetApp:
    """ASGI 3 application wrapping an ``AssetResponder``.

    ``serve()`` does blocking file I/O, so each request runs on an anyio
    worker thread. An unreadable asset is logged and answered with ``500``.

    Usage::

        app = AssetApp(AssetResponder.from_roots("./build"))
        uvicorn.run(app, host="127.0.0.1", port=0)
    """

    __slots__ = ("responder",)

    def __init__(self, responder: AssetResponder) -> None:
        self.responder = responder

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope)
        try:
            response = await anyio.to_thread.run_sync(self.responder.serve, request)
        except AssetReadError:
            logger.exception("Failed to serve %s", request.path)
            response = self.responder.text_response(500, "Internal Server Error")

        await self._send(response, send, head=request.method == "HEAD")

    @staticmethod
    async def _send(response: Response, send: Send, *, head: bool) -> None:
        """Write *response* as ASGI messages.

        ``Content-Length`` always describes the full body; a HEAD request
        gets the same headers and an empty body.
        """
        raw_headers = [(b"content-type", response.content_type.encode("latin-1"))]
        raw_headers.extend(
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in response.headers
        )
        raw_headers.append((b"content-length", str(len(response.body)).encode("latin-1")))

        await send(
            {"type": "http.response.start", "status": response.status, "headers": raw_headers}
        )
        await send({"type": "http.response.body", "body": b"" if head else response.body})

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.info("Serving assets from %s", ", ".join(map(repr, self.responder.sources)))
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
