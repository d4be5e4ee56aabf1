"""Glue — a small regex router that maps URIs to handler classes.

Basic usage::

    from glue import Glue

    class Page:
        def GET(self, id):
            return f"page {id}"

    glue = Glue()
    glue.add_route("/page/(?P<id>\\d+)", Page)
    glue.dispatch("/page/42", "GET")  # "page 42"

Serving over ASGI::

    from glue.asgi import GlueASGI
    app = GlueASGI(glue)
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ControllerNotFound",
    "Glue",
    "GlueConfig",
    "GlueError",
    "MatchResult",
    "MethodNotSupported",
    "PatternCompilationError",
    "ResourceNotFound",
    "Route",
    "RoutingError",
    "get_request",
    "request_context",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "glue.errors",
    "ControllerNotFound": "glue.errors",
    "Glue": "glue.glue",
    "GlueConfig": "glue.config",
    "GlueError": "glue.errors",
    "MatchResult": "glue.routing.route",
    "MethodNotSupported": "glue.errors",
    "PatternCompilationError": "glue.errors",
    "ResourceNotFound": "glue.errors",
    "Route": "glue.routing.route",
    "RoutingError": "glue.errors",
    "get_request": "glue.context",
    "request_context": "glue.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import glue`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
