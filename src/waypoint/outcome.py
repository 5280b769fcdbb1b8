"""Dispatch outcomes.

Every navigation request ends in exactly one of three variants, so callers
can ``match`` on the result instead of guessing what ``None`` meant.
"""

from dataclasses import dataclass
from typing import Any

from waypoint.routing.route import RouteMatch
from waypoint.url import RouteURL


@dataclass(frozen=True, slots=True)
class Handled:
    """A native factory produced *screen*."""

    screen: Any
    match: RouteMatch


@dataclass(frozen=True, slots=True)
class Deferred:
    """No native screen; the non-native fallback should take *url*.

    ``match`` is the matched ``DEFER`` route, or ``None`` when no pattern
    matched at all.
    """

    url: RouteURL
    match: RouteMatch | None = None

    @property
    def matched(self) -> bool:
        return self.match is not None


@dataclass(frozen=True, slots=True)
class NoOp:
    """The factory ran and intentionally produced nothing.

    Typical for routes whose whole job is a side effect, like opening an
    external browser.
    """

    match: RouteMatch


Outcome = Handled | Deferred | NoOp
