"""Turn a navigation URL into an ``Outcome``.

``Router.match`` stays pure; this module is where handlers actually run.
"""

import logging
from collections.abc import Mapping
from typing import Any

from waypoint.context import NavigationContext
from waypoint.outcome import Deferred, Handled, NoOp, Outcome
from waypoint.query import QueryParams
from waypoint.routing.route import Unmatched
from waypoint.routing.router import Router
from waypoint.url import RouteURL, parse_url

logger = logging.getLogger("waypoint.dispatch")


def dispatch(
    router: Router,
    url: str | RouteURL,
    context: NavigationContext | None = None,
    *,
    query: Mapping[str, str] | None = None,
) -> Outcome:
    """Resolve *url* and run the matched handler.

    - no pattern matches: ``Deferred`` with ``match=None``
    - a ``DEFER`` route matches: ``Deferred`` with the match, handler not run
    - the handler returns ``None``: ``NoOp``
    - the handler returns a screen: ``Handled``
    - the handler returns an ``Outcome`` (alias routes): that outcome, unchanged

    *query*, when given, replaces the query string parsed from *url*.
    Exceptions raised by handlers propagate to the caller.
    """
    route_url = parse_url(url)
    if query is not None:
        route_url = RouteURL(
            path=route_url.path,
            query=query if isinstance(query, QueryParams) else QueryParams(query),
            fragment=route_url.fragment,
            raw=route_url.raw,
        )

    result = router.match(route_url.path, route_url.query)
    if isinstance(result, Unmatched):
        logger.debug("Deferring unmatched %s", route_url)
        return Deferred(url=route_url)

    if result.route.is_deferred:
        logger.debug("Deferring %s (%s has no native handler)", route_url, result.route.path)
        return Deferred(url=route_url, match=result)

    ctx = context if context is not None else NavigationContext(router=router)
    screen = result.route.handler(route_url, dict(result.params), ctx)  # type: ignore[operator]
    if isinstance(screen, (Handled, Deferred, NoOp)):
        # Alias routes forward whatever the rewritten URL resolved to
        return screen
    if screen is None:
        logger.debug("%s produced no screen for %s", result.route.handler_name, route_url)
        return NoOp(match=result)
    return Handled(screen=screen, match=result)


def rematch(
    context: NavigationContext,
    url: str | RouteURL,
    user_info: Mapping[str, Any] | None = None,
) -> Outcome | None:
    """Re-enter the router from inside a handler.

    Used by alias routes that rewrite the URL and hand it back. Returns the
    outcome for the rewritten URL, which ``dispatch`` passes through as-is,
    so a deferral stays a deferral. Returns ``None`` when there is no router.
    """
    if context.router is None:
        return None
    if user_info is not None:
        context = context.with_user_info(user_info)
    return dispatch(context.router, url, context)
