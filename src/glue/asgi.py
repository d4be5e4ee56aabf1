"""ASGI adapter — serve a Glue router from any ASGI server.

The adapter is the boundary between the server and the router. It
reads the request path and method from the ASGI scope, makes them the
current request context, and calls ``Glue.dispatch()`` in a worker
thread so blocking handlers never stall the event loop.

Handler results are converted with a few plain rules:

- ``bytes``          -> ``application/octet-stream``
- ``str``            -> ``text/plain; charset=utf-8``
- ``dict`` / ``list`` -> ``application/json``
- ``None``           -> ``204 No Content`` (empty body)
- ``(body, status)`` -> the body converted as above, with that status;
                        ``(None, status)`` sends an empty body with it

Usage::

    from glue import Glue
    from glue.asgi import GlueASGI

    glue = Glue()
    glue.add_route("/", HomeHandler)
    app = GlueASGI(glue)  # uvicorn module:app
"""

import json
import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

import anyio.to_thread

from glue.context import request_context
from glue.errors import RoutingError
from glue.glue import Glue

logger = logging.getLogger("glue.server")

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

Headers: TypeAlias = list[tuple[bytes, bytes]]


class GlueASGI:
    """ASGI 3 application wrapping a ``Glue`` router."""

    __slots__ = ("glue",)

    def __init__(self, glue: Glue) -> None:
        self.glue = glue

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await _handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            msg = f"Unsupported ASGI scope type: {scope['type']!r}"
            raise RuntimeError(msg)

        uri = request_uri(scope)
        method = scope["method"]

        try:
            result = await anyio.to_thread.run_sync(self._dispatch, uri, method)
            status, headers, body = to_response(result)
        except RoutingError as exc:
            status, headers, body = exc.status, *_text(str(exc))
        except Exception:
            logger.exception("Unhandled error dispatching %s %s", method, uri)
            status, headers, body = 500, *_text("500: Internal Server Error")

        await send({"type": "http.response.start", "status": status, "headers": headers})
        await send({"type": "http.response.body", "body": body})

    def _dispatch(self, uri: str, method: str) -> Any:
        # Runs in a worker thread; the context is set there, not on the loop.
        with request_context(uri, method):
            return self.glue.dispatch()


def request_uri(scope: Scope) -> str:
    """Rebuild the request URI (path plus query string) from an ASGI scope."""
    path = scope["path"]
    query = scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def to_response(result: Any) -> tuple[int, Headers, bytes]:
    """Convert a handler result into ``(status, headers, body)``."""
    status: int | None = None
    if isinstance(result, tuple) and len(result) == 2 and isinstance(result[1], int):
        result, status = result

    if result is None:
        return status or 204, [], b""
    status = status or 200
    if isinstance(result, bytes):
        return status, [(b"content-type", b"application/octet-stream")], result
    if isinstance(result, (dict, list)):
        body = json.dumps(result).encode("utf-8")
        return status, [(b"content-type", b"application/json")], body
    return status, *_text(str(result))


def _text(content: str) -> tuple[Headers, bytes]:
    return [(b"content-type", b"text/plain; charset=utf-8")], content.encode("utf-8")


async def _handle_lifespan(receive: Receive, send: Send) -> None:
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return
