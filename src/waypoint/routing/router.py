"""Compiled route matcher.

A ``Router`` is produced by ``RouteTable.compile()`` and never changes
afterwards. Matching walks the routes in precedence order and returns the
first one whose segments consume the whole path.
"""

import logging
from collections.abc import Iterator, Mapping
from urllib.parse import unquote

from waypoint.config import PRECEDENCE_REGISTRATION, PRECEDENCE_SPECIFICITY, RouterConfig
from waypoint.errors import ConfigurationError
from waypoint.query import QueryParams
from waypoint.routing.pattern import Pattern, SegmentKind
from waypoint.routing.route import MatchResult, Route, RouteMatch, Unmatched

logger = logging.getLogger("waypoint.routing")


def split_path(path: str, config: RouterConfig) -> list[str]:
    """Split an incoming path into decoded segments.

    Examples::

        ""                 -> []
        "/"                -> []
        "/courses/42/"     -> ["courses", "42"]
        "/pages/a%2Fb"     -> ["pages", "a/b"]
        "/courses?x=1#top" -> ["courses"]
    """
    path = path.partition("#")[0].partition("?")[0]
    if path.startswith("/"):
        path = path[1:]
    if config.strip_trailing_slash and path.endswith("/"):
        path = path[:-1]
    if not path:
        return []
    parts = path.split("/")
    if config.decode_segments:
        parts = [unquote(p) for p in parts]
    return parts


def match_pattern(pattern: Pattern, parts: list[str]) -> dict[str, str] | None:
    """Match decoded path segments against one pattern.

    Returns the captured params, or ``None`` if the pattern does not fit.
    """
    params: dict[str, str] = {}
    for i, seg in enumerate(pattern.segments):
        if seg.kind is SegmentKind.WILDCARD:
            # Absorbs the remainder, possibly nothing. Slashes decoded from
            # %2F stay encoded so only real separators join the value.
            params[seg.name or ""] = "/".join(p.replace("/", "%2F") for p in parts[i:])
            return params
        if i >= len(parts):
            return None
        part = parts[i]
        if seg.kind is SegmentKind.CAPTURE:
            if not part:
                return None
            params[seg.name or ""] = part
        elif seg.value != part:
            return None

    if len(parts) != len(pattern.segments):
        return None
    return params


def _ordered(routes: list[Route], precedence: str) -> tuple[Route, ...]:
    if precedence == PRECEDENCE_REGISTRATION:
        return tuple(sorted(routes, key=lambda r: r.index))
    if precedence == PRECEDENCE_SPECIFICITY:
        return tuple(sorted(routes, key=lambda r: (r.pattern.rank, r.index)))
    msg = (
        f"Unknown route precedence {precedence!r}. "
        f"Use {PRECEDENCE_REGISTRATION!r} or {PRECEDENCE_SPECIFICITY!r}."
    )
    raise ConfigurationError(msg)


class Router:
    """Immutable route matcher.

    Usage::

        table = RouteTable()
        table.add("/courses/:courseID", course_screen)
        table.defer("/conversations")
        router = table.compile()
        result = router.match("/courses/42")

    Reads need no locking: the route tuple is built once in ``__init__``.
    """

    __slots__ = ("_by_name", "_config", "_routes")

    def __init__(self, routes: list[Route], config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._routes = _ordered(routes, self._config.precedence)
        self._by_name = {r.name: r for r in self._routes if r.name is not None}

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes, in the order they are tried."""
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def get(self, name: str) -> Route:
        """Return the route registered under *name*.

        Raises ``KeyError`` if no route has that name.
        """
        return self._by_name[name]

    def match(self, path: str, query: Mapping[str, str] | None = None) -> MatchResult:
        """Match *path* against the routes.

        Returns a ``RouteMatch`` on success and ``Unmatched`` otherwise.
        *query* is carried through to the match untouched; it never affects
        which route wins.
        """
        parts = split_path(path, self._config)
        for route in self._routes:
            params = match_pattern(route.pattern, parts)
            if params is not None:
                logger.debug("Matched %r to %s", path, route.path)
                return RouteMatch(
                    route=route,
                    params=params,
                    query=query if query is not None else QueryParams(),
                )

        logger.debug("No route matches %r", path)
        return Unmatched(path=path)
