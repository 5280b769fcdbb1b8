"""Waypoint CLI — inspect and exercise a route table.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys

DEFAULT_TABLE = "waypoint.student.routes:build_router"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — deep-link routing for the student app.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log route compilation and matching",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "--table",
        default=DEFAULT_TABLE,
        help="Import string of a Router, RouteTable, or factory (e.g. myapp.routes:router)",
    )

    # -- waypoint match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a URL to an outcome")
    match_parser.add_argument("url", help="Path or full URL to resolve")
    match_parser.add_argument(
        "--table",
        default=DEFAULT_TABLE,
        help="Import string of a Router, RouteTable, or factory",
    )
    match_parser.add_argument(
        "--precedence",
        choices=("registration", "specificity"),
        default=None,
        help="Override the table's precedence when compiling a RouteTable",
    )
    match_parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="FEATURE",
        help="Turn a feature flag off for this dispatch (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waypoint.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from waypoint.cli._match import run_match

        run_match(args)
