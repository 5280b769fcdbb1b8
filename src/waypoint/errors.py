"""Waypoint exception hierarchy.

Only configuration defects are exceptions. An unmatched path, a deferred
route and a handler that produces nothing are ordinary outcomes.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a route table or router configuration is invalid.

    Always raised while the table is being built, before the first match.
    """
