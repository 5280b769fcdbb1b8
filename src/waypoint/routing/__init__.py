"""Routing — validated route table compiled into an immutable matcher.

Routes are registered during setup with ``RouteTable`` and compiled into a
``Router`` that is only ever read afterwards.
"""

from waypoint.routing.pattern import Pattern, Segment, SegmentKind, parse_pattern
from waypoint.routing.route import DEFER, Fallback, MatchResult, Route, RouteMatch, Unmatched
from waypoint.routing.router import Router
from waypoint.routing.table import RouteTable

__all__ = [
    "DEFER",
    "Fallback",
    "MatchResult",
    "Pattern",
    "Route",
    "RouteMatch",
    "RouteTable",
    "Router",
    "Segment",
    "SegmentKind",
    "Unmatched",
    "parse_pattern",
]
