"""Tests for waypoint.dispatch — handler invocation and outcomes."""

import logging

import pytest

from waypoint.context import NavigationContext
from waypoint.dispatch import dispatch, rematch
from waypoint.outcome import Deferred, Handled, NoOp
from waypoint.routing.table import RouteTable
from waypoint.testing import RecordingNavigator
from waypoint.url import RouteURL


def _screen(url, params, context):
    return ("screen", url.path, params)


def _nothing(url, params, context) -> None:
    return None


def _router():
    table = RouteTable()
    table.add("/courses/:courseID/grades", _screen)
    table.add("/conferences/:id/join", _nothing)
    table.defer("/conversations")
    return table.compile()


class TestOutcomes:
    def test_handled(self) -> None:
        outcome = dispatch(_router(), "/courses/42/grades")
        assert isinstance(outcome, Handled)
        assert outcome.screen == ("screen", "/courses/42/grades", {"courseID": "42"})
        assert outcome.match.route.path == "/courses/:courseID/grades"

    def test_deferred_route(self) -> None:
        outcome = dispatch(_router(), "/conversations")
        assert isinstance(outcome, Deferred)
        assert outcome.matched is True
        assert outcome.match is not None
        assert outcome.match.route.is_deferred is True

    def test_unmatched_defers_without_match(self) -> None:
        outcome = dispatch(_router(), "/not/a/route")
        assert isinstance(outcome, Deferred)
        assert outcome.matched is False
        assert outcome.match is None
        assert outcome.url.path == "/not/a/route"

    def test_noop(self) -> None:
        outcome = dispatch(_router(), "/conferences/9/join")
        assert isinstance(outcome, NoOp)
        assert outcome.match.params == {"id": "9"}

    def test_three_outcomes_distinct(self) -> None:
        router = _router()
        kinds = {
            type(dispatch(router, "/courses/1/grades")),
            type(dispatch(router, "/conversations")),
            type(dispatch(router, "/conferences/1/join")),
        }
        assert kinds == {Handled, Deferred, NoOp}

    def test_deferred_handler_never_called(self) -> None:
        calls: list[str] = []

        table = RouteTable()
        table.defer("/dev-menu")
        table.add("/dev-menu/experimental-features", lambda u, p, c: calls.append(u.path))
        dispatch(table.compile(), "/dev-menu")
        assert calls == []


class TestURLHandling:
    def test_full_url(self) -> None:
        outcome = dispatch(_router(), "https://school.instructure.com/courses/7/grades")
        assert isinstance(outcome, Handled)
        assert outcome.match.params == {"courseID": "7"}

    def test_route_url_instance(self) -> None:
        outcome = dispatch(_router(), RouteURL(path="/courses/7/grades"))
        assert isinstance(outcome, Handled)

    def test_query_override(self) -> None:
        seen = {}

        def capture(url, params, context):
            seen["query"] = dict(url.query)
            return "ok"

        table = RouteTable()
        table.add("/calendar", capture)
        outcome = dispatch(table.compile(), "/calendar?event_id=1", query={"event_id": "2"})
        assert isinstance(outcome, Handled)
        assert seen["query"] == {"event_id": "2"}
        assert outcome.match.query["event_id"] == "2"

    def test_handler_gets_copy_of_params(self) -> None:
        def mutate(url, params, context):
            params["courseID"] = "changed"
            return "ok"

        table = RouteTable()
        table.add("/courses/:courseID", mutate)
        outcome = dispatch(table.compile(), "/courses/1")
        assert isinstance(outcome, Handled)
        assert outcome.match.params == {"courseID": "1"}


class TestContext:
    def test_context_passed_to_handler(self) -> None:
        received = []

        def handler(url, params, context):
            received.append(context)
            return "ok"

        table = RouteTable()
        table.add("/profile", handler)
        ctx = NavigationContext(features={"x": True})
        dispatch(table.compile(), "/profile", ctx)
        assert received == [ctx]

    def test_default_context_carries_router(self) -> None:
        received = []

        def handler(url, params, context):
            received.append(context)
            return "ok"

        table = RouteTable()
        table.add("/profile", handler)
        router = table.compile()
        dispatch(router, "/profile")
        assert received[0].router is router

    def test_handler_errors_propagate(self) -> None:
        def broken(url, params, context):
            raise ValueError("boom")

        table = RouteTable()
        table.add("/broken", broken)
        with pytest.raises(ValueError, match="boom"):
            dispatch(table.compile(), "/broken")

    def test_side_effect_through_navigator(self) -> None:
        def join(url, params, context):
            context.navigator.open(url)

        table = RouteTable()
        table.add("/join", join)
        nav = RecordingNavigator()
        outcome = dispatch(table.compile(), "/join", NavigationContext(navigator=nav))
        assert isinstance(outcome, NoOp)
        assert [u.path for u in nav.opened] == ["/join"]


class TestRematch:
    def test_rematch_returns_outcome(self) -> None:
        router = _router()
        ctx = NavigationContext(router=router)
        outcome = rematch(ctx, "/courses/3/grades")
        assert isinstance(outcome, Handled)
        assert outcome.screen == ("screen", "/courses/3/grades", {"courseID": "3"})

    def test_rematch_without_router(self) -> None:
        assert rematch(NavigationContext(), "/courses/3/grades") is None

    def test_rematch_keeps_deferral(self) -> None:
        ctx = NavigationContext(router=_router())
        deferred = rematch(ctx, "/conversations")
        assert isinstance(deferred, Deferred)
        assert deferred.matched is True

        unmatched = rematch(ctx, "/unknown")
        assert isinstance(unmatched, Deferred)
        assert unmatched.matched is False

    def test_rematch_user_info(self) -> None:
        def handler(url, params, context):
            return context.user_info

        table = RouteTable()
        table.add("/info", handler)
        ctx = NavigationContext(router=table.compile())
        outcome = rematch(ctx, "/info", {"modal": True})
        assert isinstance(outcome, Handled)
        assert outcome.screen == {"modal": True}


class TestAliasForwarding:
    def _alias_router(self):
        def alias(url, params, context):
            return rematch(context, "/" + params["rest"])

        table = RouteTable()
        table.add("/alias/*rest", alias)
        table.add("/courses/:courseID/grades", _screen)
        table.add("/conferences/:id/join", _nothing)
        table.defer("/conversations")
        return table.compile()

    def test_alias_to_deferred_route_defers(self) -> None:
        outcome = dispatch(self._alias_router(), "/alias/conversations")
        assert isinstance(outcome, Deferred)
        assert outcome.match is not None
        assert outcome.match.route.path == "/conversations"
        assert outcome.url.path == "/conversations"

    def test_alias_to_unmatched_defers(self) -> None:
        outcome = dispatch(self._alias_router(), "/alias/courses/1/outcomes")
        assert isinstance(outcome, Deferred)
        assert outcome.matched is False

    def test_alias_to_noop_stays_noop(self) -> None:
        outcome = dispatch(self._alias_router(), "/alias/conferences/2/join")
        assert isinstance(outcome, NoOp)
        assert outcome.match.route.path == "/conferences/:id/join"

    def test_alias_to_screen(self) -> None:
        outcome = dispatch(self._alias_router(), "/alias/courses/5/grades")
        assert isinstance(outcome, Handled)
        assert outcome.match.params == {"courseID": "5"}


class TestLogging:
    def test_unmatched_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="waypoint"):
            dispatch(_router(), "/nowhere")
        assert "No route matches '/nowhere'" in caplog.text
        assert "Deferring unmatched /nowhere" in caplog.text
