"""Glue CLI — route table introspection.

Entry point registered as ``glue`` in ``pyproject.toml``::

    [project.scripts]
    glue = "glue.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``glue`` command."""
    parser = argparse.ArgumentParser(
        prog="glue",
        description="Glue — map URIs to handler classes.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and matching details",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- glue routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in precedence order")
    routes_parser.add_argument("glue", help="Import string (e.g. myapp:glue)")

    # -- glue match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route handles a path")
    match_parser.add_argument("glue", help="Import string (e.g. myapp:glue)")
    match_parser.add_argument("path", help="Request path, query string allowed")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from glue.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from glue.cli._match import run_match

        run_match(args)
