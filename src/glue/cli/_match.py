"""``glue match`` — show which route would handle a path.

Matching only; no handler is constructed or called.
"""

import argparse
import sys

from glue.cli._resolve import resolve_glue
from glue.errors import ResourceNotFound
from glue.routing.route import handler_name


def run_match(args: argparse.Namespace) -> None:
    """Print the winning route and its captures, or exit 1 if none matches."""
    try:
        glue = resolve_glue(args.glue)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    path = glue.remove_query_string(args.path)
    try:
        result = glue.match(path)
    except ResourceNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    route = result.route
    print(f"pattern: {route.key}")
    print(f"handler: {handler_name(route.handler)}")
    if route.args:
        print(f"args:    {', '.join(repr(a) for a in route.args)}")
    for name, value in result.groups.items():
        print(f"  [{name}] {value!r}")
