"""Argument binding — map captured groups onto an operation's parameters.

Each parameter of the operation, in declared order, receives:

- the whole captures mapping if it is named ``matches``
- the named capture of the same name, if the pattern has one
- ``None`` otherwise

Handlers can therefore declare either ``def GET(self, matches)`` and
pick groups out themselves, or ``def GET(self, id)`` and receive the
``(?P<id>...)`` capture directly.
"""

import inspect
from collections.abc import Callable
from typing import Any

from glue.routing.route import Captures

MATCHES_PARAM = "matches"


def bind_arguments(
    operation: Callable[..., Any],
    groups: Captures,
) -> tuple[list[Any], dict[str, Any]]:
    """Build ``(args, kwargs)`` for calling *operation* with *groups*.

    Positional-or-keyword parameters are passed positionally, keyword-only
    parameters by keyword. ``*args`` and ``**kwargs`` receive nothing.
    """
    args: list[Any] = []
    kwargs: dict[str, Any] = {}

    for param in inspect.signature(operation).parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue

        value = groups if param.name == MATCHES_PARAM else groups.get(param.name)

        if param.kind is param.KEYWORD_ONLY:
            kwargs[param.name] = value
        else:
            args.append(value)

    return args, kwargs
