"""Navigation context passed explicitly into every route handler.

Handlers never reach for process-wide singletons. Whatever state a screen
factory needs (the router for alias routes, the navigator for side effects,
feature flags, the login delegate) travels in a ``NavigationContext``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from waypoint.routing.router import Router


@runtime_checkable
class Navigator(Protocol):
    """The presentation side of navigation. Implemented outside waypoint."""

    def route(self, url: Any, source: Any = None, options: Any = None) -> None: ...
    def show(self, screen: Any, source: Any = None, options: Any = None) -> None: ...
    def open(self, url: Any) -> None: ...
    def present_tool(self, context: Any, tool_id: str) -> None: ...


@dataclass(frozen=True, slots=True)
class NavigationContext:
    """State available to route handlers.

    All fields are optional so tests can build exactly what a handler needs::

        ctx = NavigationContext(features={"native_dashboard": False})
    """

    router: "Router | None" = None
    navigator: Navigator | None = None
    login_delegate: Any = None
    features: Mapping[str, bool] = field(default_factory=dict)
    user_info: Mapping[str, Any] = field(default_factory=dict)

    def feature_enabled(self, name: str, default: bool = True) -> bool:
        return self.features.get(name, default)

    def with_user_info(self, user_info: Mapping[str, Any] | None) -> "NavigationContext":
        return replace(self, user_info=dict(user_info or {}))
