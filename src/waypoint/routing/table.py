"""Route table builder.

Routes are registered once at startup and compiled into an immutable
``Router``. Every pattern is parsed and validated as it is added, so a
malformed table fails before the first navigation request.
"""

import logging
from collections.abc import Callable, Mapping

from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError
from waypoint.routing.pattern import parse_pattern
from waypoint.routing.route import DEFER, Fallback, Handler, Route
from waypoint.routing.router import Router

logger = logging.getLogger("waypoint.routing")


class RouteTable:
    """Mutable collection of routes, consumed once by ``compile()``.

    Usage::

        table = RouteTable()

        @table.route("/courses/:courseID/grades")
        def grades(url, params, context):
            return Screen("GradeList", {"course_id": params["courseID"]})

        table.defer("/conversations")
        router = table.compile()
    """

    __slots__ = ("_compiled", "_names", "_routes", "_shapes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._shapes: dict[tuple[tuple[str, str], ...], str] = {}
        self._names: set[str] = set()
        self._compiled = False

    def __len__(self) -> int:
        return len(self._routes)

    def add(
        self,
        pattern: str,
        handler: Handler | Fallback | None,
        *,
        name: str | None = None,
    ) -> Route:
        """Register *handler* for *pattern*. ``None`` is the same as ``DEFER``.

        Raises ``ConfigurationError`` for a malformed or duplicate pattern and
        for a name that is already taken.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        parsed = parse_pattern(pattern)
        if parsed.shape in self._shapes:
            msg = (
                f"Route pattern {pattern!r} duplicates already registered "
                f"pattern {self._shapes[parsed.shape]!r}."
            )
            raise ConfigurationError(msg)
        if name is not None and name in self._names:
            msg = f"Route name {name!r} is already registered."
            raise ConfigurationError(msg)
        if handler is not None and handler is not DEFER and not callable(handler):
            msg = f"Handler for route pattern {pattern!r} must be callable, DEFER, or None."
            raise ConfigurationError(msg)

        route = Route(
            pattern=parsed,
            handler=DEFER if handler is None else handler,
            name=name,
            index=len(self._routes),
        )
        self._routes.append(route)
        self._shapes[parsed.shape] = pattern
        if name is not None:
            self._names.add(name)
        return route

    def defer(self, pattern: str, *, name: str | None = None) -> Route:
        """Register *pattern* with no native handler."""
        return self.add(pattern, DEFER, name=name)

    def route(self, pattern: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        """Register a handler via decorator."""

        def decorator(func: Handler) -> Handler:
            self.add(pattern, func, name=name)
            return func

        return decorator

    def update(self, mapping: Mapping[str, Handler | Fallback | None]) -> None:
        """Register a literal ``{pattern: handler}`` table in iteration order."""
        for pattern, handler in mapping.items():
            self.add(pattern, handler)

    def compile(self, config: RouterConfig | None = None) -> Router:
        """Freeze the table into a ``Router``. No more routes can be added."""
        router = Router(list(self._routes), config)
        self._compiled = True
        logger.info(
            "Compiled %d routes (precedence=%s)", len(router), router.config.precedence
        )
        return router

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Handler | Fallback | None],
        config: RouterConfig | None = None,
    ) -> Router:
        """Build and compile a router from a literal table in one step."""
        table = cls()
        table.update(mapping)
        return table.compile(config)
