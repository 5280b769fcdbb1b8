"""Waypoint — deep-link routing for the student app.

Matches navigation URLs against a table of path patterns and turns the
result into an explicit outcome: a native screen, a deferral to the web
fallback, or a deliberate no-op.

Basic usage::

    from waypoint import RouteTable, dispatch

    table = RouteTable()

    @table.route("/courses/:courseID/grades")
    def grades(url, params, context):
        return ("GradeList", params["courseID"])

    table.defer("/conversations")
    router = table.compile()

    outcome = dispatch(router, "/courses/42/grades")
"""

__version__ = "0.1.0"
__all__ = [
    "DEFER",
    "ConfigurationError",
    "Deferred",
    "Handled",
    "NavigationContext",
    "Navigator",
    "NoOp",
    "Outcome",
    "QueryParams",
    "RouteMatch",
    "RouteTable",
    "RouteURL",
    "Router",
    "RouterConfig",
    "Unmatched",
    "WaypointError",
    "dispatch",
    "parse_url",
    "rematch",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "DEFER": "waypoint.routing.route",
    "ConfigurationError": "waypoint.errors",
    "Deferred": "waypoint.outcome",
    "Handled": "waypoint.outcome",
    "NavigationContext": "waypoint.context",
    "Navigator": "waypoint.context",
    "NoOp": "waypoint.outcome",
    "Outcome": "waypoint.outcome",
    "QueryParams": "waypoint.query",
    "RouteMatch": "waypoint.routing.route",
    "RouteTable": "waypoint.routing.table",
    "RouteURL": "waypoint.url",
    "Router": "waypoint.routing.router",
    "RouterConfig": "waypoint.config",
    "Unmatched": "waypoint.routing.route",
    "WaypointError": "waypoint.errors",
    "dispatch": "waypoint.dispatch",
    "parse_url": "waypoint.url",
    "rematch": "waypoint.dispatch",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` cheap while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
