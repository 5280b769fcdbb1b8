"""Tests for waypoint.routing.table — validated build step."""

import logging

import pytest

from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError
from waypoint.routing.route import DEFER, RouteMatch
from waypoint.routing.router import Router
from waypoint.routing.table import RouteTable


def _handler(url, params, context) -> str:
    return "ok"


class TestRouteTableAdd:
    def test_add_returns_route(self) -> None:
        table = RouteTable()
        route = table.add("/courses/:courseID", _handler, name="course")
        assert route.path == "/courses/:courseID"
        assert route.name == "course"
        assert route.index == 0
        assert len(table) == 1

    def test_indexes_follow_registration(self) -> None:
        table = RouteTable()
        first = table.add("/a", _handler)
        second = table.add("/b", _handler)
        assert (first.index, second.index) == (0, 1)

    def test_none_means_defer(self) -> None:
        table = RouteTable()
        route = table.add("/conversations", None)
        assert route.handler is DEFER

    def test_defer(self) -> None:
        table = RouteTable()
        route = table.defer("/dev-menu")
        assert route.is_deferred is True

    def test_decorator(self) -> None:
        table = RouteTable()

        @table.route("/logs", name="logs")
        def logs(url, params, context) -> str:
            return "logs"

        router = table.compile()
        assert router.get("logs").handler is logs

    def test_update_keeps_mapping_order(self) -> None:
        table = RouteTable()
        table.update({"/users/:id": _handler, "/users/me": None})
        router = table.compile()
        assert [r.path for r in router.routes] == ["/users/:id", "/users/me"]


class TestRouteTableValidation:
    def test_malformed_pattern_fails_at_registration(self) -> None:
        table = RouteTable()
        with pytest.raises(ConfigurationError, match="final segment"):
            table.add("/files/*path/edit", _handler)
        assert len(table) == 0

    def test_duplicate_pattern(self) -> None:
        table = RouteTable()
        table.add("/courses/:courseID", _handler)
        with pytest.raises(ConfigurationError, match="duplicates"):
            table.add("/courses/:courseID/", _handler)

    def test_same_shape_different_names_allowed(self) -> None:
        table = RouteTable()
        table.add("/courses/:courseID", _handler)
        table.add("/courses/:id", _handler)
        assert len(table) == 2

    def test_duplicate_name(self) -> None:
        table = RouteTable()
        table.add("/a", _handler, name="x")
        with pytest.raises(ConfigurationError, match="already registered"):
            table.add("/b", _handler, name="x")

    def test_non_callable_handler(self) -> None:
        table = RouteTable()
        with pytest.raises(ConfigurationError, match="must be callable"):
            table.add("/a", "not a handler")  # type: ignore[arg-type]

    def test_add_after_compile_raises(self) -> None:
        table = RouteTable()
        table.compile()
        with pytest.raises(RuntimeError, match="Cannot add routes after compilation"):
            table.add("/users", _handler)


class TestRouteTableCompile:
    def test_compile_returns_router(self) -> None:
        table = RouteTable()
        table.add("/a", _handler)
        router = table.compile()
        assert isinstance(router, Router)
        assert router.config == RouterConfig()

    def test_compile_with_config(self) -> None:
        table = RouteTable()
        router = table.compile(RouterConfig(precedence="specificity"))
        assert router.config.precedence == "specificity"

    def test_compile_logs_route_count(self, caplog: pytest.LogCaptureFixture) -> None:
        table = RouteTable()
        table.add("/a", _handler)
        table.add("/b", _handler)
        with caplog.at_level(logging.INFO, logger="waypoint.routing"):
            table.compile()
        assert "Compiled 2 routes" in caplog.text

    def test_from_mapping(self) -> None:
        router = RouteTable.from_mapping(
            {"/courses/:courseID/grades": _handler, "/conversations": None}
        )
        result = router.match("/courses/3/grades")
        assert isinstance(result, RouteMatch)
        assert result.params == {"courseID": "3"}
        assert router.routes[1].is_deferred is True

    def test_from_mapping_rejects_bad_table(self) -> None:
        with pytest.raises(ConfigurationError):
            RouteTable.from_mapping({"no-slash": _handler})
