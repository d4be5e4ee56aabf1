"""Handler resolution — turn a route's handler reference into an instance.

A handler reference is one of:

- a class (or any callable factory), used as-is
- a name registered with ``HandlerRegistry.register``
- an import string, ``"package.module:ClassName"`` or ``"package.module.ClassName"``

Resolution failures raise ``ControllerNotFound``.
"""

import importlib
from collections.abc import Callable, Mapping
from typing import Any

from glue.errors import ControllerNotFound

HandlerFactory = Callable[..., Any]


class HandlerRegistry:
    """Named handler factories, built at startup.

    Usage::

        registry = HandlerRegistry({"Home": HomeHandler})
        registry.register("Page", PageHandler)
        instance = registry.instantiate("Page", ("arg",))
    """

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[str, HandlerFactory] | None = None) -> None:
        self._factories: dict[str, HandlerFactory] = dict(factories or {})

    def register(self, name: str, factory: HandlerFactory) -> None:
        """Register *factory* under *name*. A later registration replaces it."""
        self._factories[name] = factory

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def resolve(self, handler: Any) -> HandlerFactory:
        """Return the factory a handler reference points at.

        Raises ``ControllerNotFound`` if the reference is a string that is
        neither registered nor importable, or resolves to something that
        cannot be called.
        """
        if isinstance(handler, str):
            factory = self._factories.get(handler)
            if factory is None:
                factory = _import_handler(handler)
        else:
            factory = handler

        if not callable(factory):
            raise ControllerNotFound(handler)
        return factory

    def instantiate(self, handler: Any, args: tuple[Any, ...] = ()) -> Any:
        """Resolve *handler* and construct it, positionally with *args* if any."""
        factory = self.resolve(handler)
        if args:
            return factory(*args)
        return factory()


def split_import_string(import_string: str, default_attr: str = "") -> tuple[str, str]:
    """Split ``"module:attr"`` or ``"module.attr"`` into ``(module, attr)``.

    With a colon, everything after it is the attribute path; an empty one
    falls back to *default_attr*. Without a colon, a string is taken as a
    whole module path when *default_attr* is given, and otherwise its last
    dotted component is the attribute.
    """
    module_path, sep, attr_name = import_string.partition(":")
    if sep:
        return module_path, attr_name or default_attr
    if default_attr:
        return import_string, default_attr
    module_path, _, attr_name = import_string.rpartition(".")
    return module_path, attr_name


def import_object(module_path: str, attr_name: str) -> Any:
    """Import *module_path* and walk the dotted *attr_name* on it.

    ``ModuleNotFoundError`` and ``AttributeError`` propagate. A missing
    module can be told apart from a module that exists but fails to
    import a dependency with ``is_missing_module``.
    """
    obj: Any = importlib.import_module(module_path)
    for part in attr_name.split("."):
        obj = getattr(obj, part)
    return obj


def is_missing_module(exc: ModuleNotFoundError, module_path: str) -> bool:
    """True if *exc* reports *module_path* itself (or a parent package) missing."""
    if exc.name is None:
        return False
    return module_path == exc.name or module_path.startswith(exc.name + ".")


def _import_handler(import_string: str) -> HandlerFactory:
    """Import a handler named by ``"module:attr"`` or ``"module.attr"``.

    A bare name with no module part cannot be imported and is reported
    as not found. A handler module that exists but fails while importing
    something else raises that error unchanged.
    """
    module_path, attr_name = split_import_string(import_string)
    if not module_path or not attr_name:
        raise ControllerNotFound(import_string)

    try:
        return import_object(module_path, attr_name)
    except ModuleNotFoundError as exc:
        if not is_missing_module(exc, module_path):
            raise
        raise ControllerNotFound(import_string) from exc
    except AttributeError as exc:
        raise ControllerNotFound(import_string) from exc
