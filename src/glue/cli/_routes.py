"""``glue routes`` — list registered routes.

Prints every route in the order dispatch tries them, with its handler
and constructor arguments.
"""

import argparse
import sys

from glue.cli._resolve import resolve_glue
from glue.routing.route import handler_name


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN, HANDLER, and ARGS for ``args.glue``."""
    try:
        glue = resolve_glue(args.glue)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = glue.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [
        (route.key, handler_name(route.handler), ", ".join(repr(a) for a in route.args))
        for route in routes
    ]

    max_key = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_handler = max(max(len(r[1]) for r in rows), 7)  # "HANDLER" header

    fmt = f"{{:<{max_key}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("PATTERN", "HANDLER", "ARGS").rstrip())
    sep_len = max_key + max_handler + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
