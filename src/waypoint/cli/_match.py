"""``waypoint match`` — resolve one URL and print the outcome."""

import argparse
import sys

from waypoint.cli._resolve import resolve_router
from waypoint.config import RouterConfig
from waypoint.context import NavigationContext
from waypoint.dispatch import dispatch
from waypoint.errors import ConfigurationError
from waypoint.outcome import Deferred, Handled, NoOp
from waypoint.testing import RecordingNavigator


def run_match(args: argparse.Namespace) -> None:
    """Dispatch ``args.url`` and print what happened.

    Side effects requested by handlers are recorded, not performed, and
    listed after the outcome.
    """
    config = RouterConfig(precedence=args.precedence) if args.precedence else None
    try:
        router = resolve_router(args.table, config)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    navigator = RecordingNavigator()
    context = NavigationContext(
        router=router,
        navigator=navigator,
        features={name: False for name in args.disable},
    )
    outcome = dispatch(router, args.url, context)

    match outcome:
        case Handled(screen=screen, match=m):
            print(f"handled  {m.route.path}")
            _print_params(m.params)
            print(f"screen   {screen!r}")
        case Deferred(match=None):
            print(f"deferred {args.url} (no route matches)")
        case Deferred(match=m):
            print(f"deferred {m.route.path} (no native handler)")
            _print_params(m.params)
        case NoOp(match=m):
            print(f"no-op    {m.route.path}")
            _print_params(m.params)

    for url in navigator.opened:
        print(f"opened   {url}")
    for ctx, tool_id in navigator.tools:
        print(f"tool     {tool_id} in {ctx}")


def _print_params(params: dict[str, str]) -> None:
    for key, value in params.items():
        print(f"  {key} = {value}")
