"""Glue exception hierarchy.

Shared across the route table, dispatcher, and server adapter so every
module raises and catches the same types.
"""

from dataclasses import dataclass
from typing import Any

from glue.routing.route import handler_name


class GlueError(Exception):
    """Base for all glue-specific errors."""


class ConfigurationError(GlueError):
    """Raised when a route registration is invalid."""


class PatternCompilationError(ConfigurationError):
    """A route fragment is not a valid regular expression.

    Raised by ``add_route`` so a bad pattern fails at registration time,
    never silently at dispatch.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern {pattern!r}: {reason}")


@dataclass(frozen=True, slots=True)
class RoutingError(GlueError):
    """A dispatch failure that maps to an HTTP status code.

    Raised by the dispatcher. The ASGI adapter catches these and turns
    them into plain-text responses.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class ResourceNotFound(RoutingError):  # noqa: N818 — mirrors the HTTP vocabulary
    """404 — no registered pattern matches the request path."""

    def __init__(self, path: str) -> None:
        super().__init__(status=404, detail=f"URI {path!r} not found")
        object.__setattr__(self, "path", path)


class ControllerNotFound(RoutingError):  # noqa: N818
    """500 — the matched route's handler does not resolve to a type."""

    def __init__(self, handler: Any) -> None:
        super().__init__(status=500, detail=f"Handler {handler_name(handler)!r} not found")
        object.__setattr__(self, "handler", handler)


class MethodNotSupported(RoutingError):  # noqa: N818
    """405 — the handler has no public operation for the translated method."""

    def __init__(self, handler: Any, method: str) -> None:
        super().__init__(
            status=405,
            detail=f"Method {method!r} not supported by handler {handler_name(handler)!r}",
        )
        object.__setattr__(self, "handler", handler)
        object.__setattr__(self, "method", method)

