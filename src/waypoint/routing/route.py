"""Route, RouteMatch and Unmatched frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from waypoint.routing.pattern import Pattern


class Fallback(Enum):
    """Marker for routes that exist but have no native handler."""

    DEFER = "defer"


DEFER = Fallback.DEFER

# (url, params, context) -> screen descriptor or None
Handler = Callable[[Any, dict[str, str], Any], Any]


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    Created by ``RouteTable`` during setup, never mutated afterwards.
    ``index`` is the registration position and breaks precedence ties.
    """

    pattern: Pattern
    handler: Handler | Fallback
    name: str | None = None
    index: int = 0

    @property
    def path(self) -> str:
        return self.pattern.source

    @property
    def is_deferred(self) -> bool:
        return self.handler is DEFER

    @property
    def handler_name(self) -> str:
        if self.handler is DEFER:
            return "<defer>"
        return getattr(self.handler, "__name__", repr(self.handler))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: dict[str, str]
    query: Mapping[str, str] = field(default_factory=dict)

    @property
    def handler(self) -> Handler | Fallback:
        return self.route.handler


@dataclass(frozen=True, slots=True)
class Unmatched:
    """No registered pattern fits *path*. A value, not an error."""

    path: str


MatchResult = RouteMatch | Unmatched
