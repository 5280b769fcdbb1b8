"""Test helpers for code that navigates.

``RecordingNavigator`` stands in for the presentation stack and records
what it was asked to do::

    nav = RecordingNavigator()
    ctx = NavigationContext(router=router, navigator=nav)
    dispatch(router, "/courses/1/conferences/2/join", ctx)
    assert nav.opened == [parse_url("/courses/1/conferences/2/join")]
"""

from dataclasses import dataclass, field
from typing import Any

from waypoint.url import RouteURL, parse_url


@dataclass(slots=True)
class RecordingNavigator:
    """A ``Navigator`` that records calls instead of presenting anything."""

    calls: list[tuple[RouteURL, Any, Any]] = field(default_factory=list)
    screen_calls: list[tuple[Any, Any, Any]] = field(default_factory=list)
    opened: list[RouteURL] = field(default_factory=list)
    tools: list[tuple[Any, str]] = field(default_factory=list)

    def route(self, url: str | RouteURL, source: Any = None, options: Any = None) -> None:
        self.calls.append((parse_url(url), source, options))

    def show(self, screen: Any, source: Any = None, options: Any = None) -> None:
        self.screen_calls.append((screen, source, options))

    def open(self, url: str | RouteURL) -> None:
        self.opened.append(parse_url(url))

    def present_tool(self, context: Any, tool_id: str) -> None:
        self.tools.append((context, tool_id))

    def last_routed_to(self, url: str | RouteURL, **kwargs: Any) -> bool:
        """True if the most recent ``route`` call went to *url*.

        Pass ``options=...`` to also compare the route options.
        """
        if not self.calls:
            return False
        last_url, _, last_options = self.calls[-1]
        expected = parse_url(url)
        if (last_url.path, last_url.query, last_url.fragment) != (
            expected.path,
            expected.query,
            expected.fragment,
        ):
            return False
        if "options" in kwargs:
            return last_options == kwargs["options"]
        return True
