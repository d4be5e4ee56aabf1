"""Request-scoped context via ContextVar.

Provides:
- ``RequestInfo``: the path and method of the request being served.
- ``request_var``: the current ``RequestInfo`` for this task/thread.
- ``request_context``: a context manager that sets and resets it.

The server adapter sets the context before dispatch. ``Glue.dispatch``
falls back to it when called without an explicit path or method.
Accessing it outside a request raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local across
    threads. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RequestInfo:
    """The parts of a request the router needs.

    ``path`` is the raw request URI and may still carry a query string.
    """

    path: str
    method: str


request_var: ContextVar[RequestInfo] = ContextVar("glue_request")
"""The current request. Set by the server adapter before dispatch."""


def get_request() -> RequestInfo:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


@contextmanager
def request_context(path: str, method: str) -> Iterator[RequestInfo]:
    """Make ``(path, method)`` the current request for the enclosed block.

    Usage::

        with request_context("/items/5?x=1", "get"):
            glue.dispatch()
    """
    info = RequestInfo(path=path, method=method)
    token = request_var.set(info)
    try:
        yield info
    finally:
        request_var.reset(token)
