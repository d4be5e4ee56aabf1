"""The Glue router — maps a URI and HTTP method to a handler operation.

Routes are regular-expression fragments bound to a handler class::

    glue = Glue("/api")
    glue.add_routes({
        "/": HomeHandler,
        "/page/(?P<id>\\d+)": PageHandler,
        "/files/(.+)": [FileHandler, "/srv/files"],
    })

    glue.dispatch("/api/page/42", "GET")  # PageHandler().GET(id="42")

Every pattern is anchored, accepts an optional trailing slash, and
matches case-insensitively. On each dispatch the routes are tried in
descending order of their raw pattern key; the first full match wins.
"""

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from glue.config import GlueConfig
from glue.context import get_request
from glue.errors import ConfigurationError, MethodNotSupported, ResourceNotFound
from glue.routing.binding import bind_arguments
from glue.routing.handlers import HandlerFactory, HandlerRegistry
from glue.routing.patterns import compile_pattern
from glue.routing.route import MatchResult, Route, captures_of
from glue.routing.translators import MethodTranslator, identity

logger = logging.getLogger("glue.routing")


class Glue:
    """Regex route table and dispatcher.

    Registration is expected to finish before requests are served.
    Writers swap in a fresh table under a lock, so a dispatch running
    concurrently with a registration always sees a consistent snapshot.
    """

    __slots__ = ("_config", "_handlers", "_routes", "_translator", "_write_lock")

    def __init__(
        self,
        base_url: str = "",
        *,
        config: GlueConfig | None = None,
        handlers: Mapping[str, HandlerFactory] | None = None,
    ) -> None:
        config = config or GlueConfig()
        if base_url:
            config = GlueConfig(
                base_url=base_url,
                ignore_case=config.ignore_case,
                trailing_slash=config.trailing_slash,
            )
        self._config = config
        self._handlers = HandlerRegistry(handlers)
        self._routes: dict[str, Route] = {}
        self._translator: MethodTranslator = identity
        self._write_lock = threading.Lock()

    @property
    def config(self) -> GlueConfig:
        return self._config

    # -- Registration --

    def add_route(self, pattern: str, handler: Any, args: tuple[Any, ...] | list[Any] = ()) -> Route:
        """Register *handler* for the regex fragment *pattern*.

        *args* are passed positionally to the handler's constructor on
        every dispatch. Registering the same pattern again replaces the
        earlier route.

        Raises ``PatternCompilationError`` if *pattern* is not a valid regex.
        """
        config = self._config
        regex = compile_pattern(
            pattern,
            config.base_url,
            ignore_case=config.ignore_case,
            trailing_slash=config.trailing_slash,
        )
        route = Route(
            key=config.base_url + pattern,
            pattern=pattern,
            regex=regex,
            handler=handler,
            args=tuple(args),
        )

        with self._write_lock:
            routes = dict(self._routes)
            replaced = route.key in routes
            routes[route.key] = route
            self._routes = routes

        logger.debug(
            "%s route %r -> %r", "Replaced" if replaced else "Added", route.key, handler
        )
        return route

    def add_routes(self, routes: Mapping[str, Any]) -> None:
        """Register many routes at once.

        Each value is either a handler, or a list/tuple whose first item
        is the handler and whose remaining items are constructor args::

            glue.add_routes({
                "/": "Home",
                "/files/(.+)": ["Files", "/srv/files"],
            })
        """
        for pattern, target in routes.items():
            if isinstance(target, (list, tuple)):
                if not target:
                    msg = f"Route {pattern!r} has an empty handler sequence."
                    raise ConfigurationError(msg)
                handler, *args = target
                self.add_route(pattern, handler, args)
            else:
                self.add_route(pattern, target)

    def register_handler(self, name: str, factory: HandlerFactory) -> None:
        """Make *factory* resolvable as the handler name *name*."""
        self._handlers.register(name, factory)

    def set_method_translator(self, translator: Callable[[str], str] | None) -> None:
        """Install the HTTP method -> operation name mapping.

        ``None`` restores the default, which uses the method name as-is.
        """
        self._translator = translator or identity

    # -- Introspection --

    @property
    def routes(self) -> list[Route]:
        """Registered routes in the order dispatch tries them."""
        table = self._routes
        return [table[key] for key in sorted(table, reverse=True)]

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        return key in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    # -- Dispatch --

    def match(self, path: str) -> MatchResult:
        """Find the route that handles *path*.

        Routes are tried in descending order of their raw key, recomputed
        on every call. Raises ``ResourceNotFound`` if none matches.
        """
        for route in self.routes:
            m = route.regex.fullmatch(path)
            if m is not None:
                logger.debug("Matched %r with route %r", path, route.key)
                return MatchResult(route=route, groups=captures_of(m))
        raise ResourceNotFound(path)

    def dispatch(self, path: str | None = None, method: str | None = None) -> Any:
        """Route a request to its handler and return the handler's result.

        *path* and *method* default to the current request context, with
        the query string removed from the path and the method upper-cased.

        Raises:
            ResourceNotFound: no route matches the path.
            ControllerNotFound: the route's handler cannot be resolved.
            MethodNotSupported: the handler has no public operation for
                the translated method.
            LookupError: a value was omitted outside a request context.
        """
        if not path:
            path = self.remove_query_string(get_request().path)
        if not method:
            method = get_request().method.upper()

        result = self.match(path)
        route = result.route

        controller = self._handlers.instantiate(route.handler, route.args)
        operation_name = self._translator(method)
        operation = _public_operation(controller, operation_name)
        if operation is None:
            raise MethodNotSupported(route.handler, operation_name)

        args, kwargs = bind_arguments(operation, result.groups)
        return operation(*args, **kwargs)

    @staticmethod
    def remove_query_string(uri: str) -> str:
        """Drop everything from the first ``?`` onward."""
        return uri.partition("?")[0]


def _public_operation(controller: Any, name: str) -> Callable[..., Any] | None:
    """Return the bound public method *name* of *controller*, if any."""
    if not name or name.startswith("_"):
        return None
    operation = getattr(controller, name, None)
    if not callable(operation):
        return None
    return operation
