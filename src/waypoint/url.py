"""Parsed navigation URLs.

Deep links arrive in several shapes: bare paths from in-app navigation,
full ``https://school.instructure.com/...`` universal links, and custom
scheme links from push notifications. Only the path, query and fragment
take part in routing.
"""

from dataclasses import dataclass, field, replace
from urllib.parse import urlencode, urlsplit

from waypoint.query import QueryParams

ORIGIN_MODULE_ITEM_DETAILS = "module_item_details"
ORIGIN_CALENDAR = "calendar"
ORIGIN_NOTIFICATION = "notification"


@dataclass(frozen=True, slots=True)
class RouteURL:
    """A navigation URL reduced to what routing needs."""

    path: str
    query: QueryParams = field(default_factory=QueryParams)
    fragment: str | None = None
    raw: str = ""

    @property
    def origin(self) -> str | None:
        return self.query.get("origin")

    @property
    def origin_is_module_item_details(self) -> bool:
        return self.origin == ORIGIN_MODULE_ITEM_DETAILS

    @property
    def origin_is_calendar(self) -> bool:
        return self.origin == ORIGIN_CALENDAR

    @property
    def origin_is_notification(self) -> bool:
        return self.origin == ORIGIN_NOTIFICATION

    def with_path(self, path: str) -> "RouteURL":
        """Return a copy pointing at *path*, keeping query and fragment."""
        return replace(self, path=path)

    def __str__(self) -> str:
        text = self.path
        if self.query:
            text += "?" + urlencode(
                {key: self.query.get_list(key) for key in self.query}, doseq=True
            )
        if self.fragment:
            text += "#" + self.fragment
        return text


def parse_url(url: "str | RouteURL") -> RouteURL:
    """Parse *url* into a ``RouteURL``.

    Scheme and host are dropped. The path keeps its percent-encoding so the
    router can split on real separators before decoding.
    """
    if isinstance(url, RouteURL):
        return url
    parts = urlsplit(url)
    return RouteURL(
        path=parts.path or "/",
        query=QueryParams(parts.query),
        fragment=parts.fragment or None,
        raw=url,
    )
