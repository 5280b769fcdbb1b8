"""``waypoint routes`` — list registered routes in match order."""

import argparse
import sys

from waypoint.cli._resolve import resolve_router
from waypoint.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN, HANDLER and NAME for ``args.table``."""
    try:
        router = resolve_router(args.table)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not router.routes:
        print("No routes registered.")
        return

    rows = [(route.path, route.handler_name, route.name or "") for route in router.routes]

    max_path = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_handler = max(max(len(r[1]) for r in rows), 7)  # "HANDLER" header

    fmt = f"{{:<{max_path}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("PATTERN", "HANDLER", "NAME").rstrip())
    print("-" * min(max_path + max_handler + 8, 100))
    for path, handler_name, name in rows:
        print(fmt.format(path, handler_name, name).rstrip())
