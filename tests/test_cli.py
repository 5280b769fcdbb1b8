"""Tests for waypoint.cli — entrypoint, ``routes`` and ``match`` commands."""

import types

import pytest

from waypoint.cli import main
from waypoint.routing.table import RouteTable


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_match_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_match_missing_url(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match"])
        assert exc_info.value.code == 2

    def test_bad_precedence(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/x", "--precedence", "longest"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "waypoint" in capsys.readouterr().out


class TestRoutesCommand:
    def test_lists_student_routes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes"])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].startswith("PATTERN")
        assert "/accounts/:accountID/terms_of_service" in lines[2]
        assert "/native-route-master/*route" in lines[-1]
        assert "<defer>" in out

    def test_empty_table(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        mod = types.ModuleType("_fake_waypoint_empty")
        mod.router = RouteTable().compile()  # type: ignore[attr-defined]
        monkeypatch.setitem(__import__("sys").modules, "_fake_waypoint_empty", mod)

        main(["routes", "--table", "_fake_waypoint_empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--table", "nonexistent_module_xyz:router"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestMatchCommand:
    def test_handled(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/courses/42/grades"])
        out = capsys.readouterr().out
        assert "handled  /courses/:courseID/grades" in out
        assert "courseID = 42" in out
        assert "GradeList" in out

    def test_deferred_route(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/conversations"])
        assert "deferred /conversations (no native handler)" in capsys.readouterr().out

    def test_unmatched(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/courses/1/settings"])
        assert "(no route matches)" in capsys.readouterr().out

    def test_noop_with_side_effect(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/courses/1/conferences/2/join"])
        out = capsys.readouterr().out
        assert "no-op    /:context/:contextID/conferences/:conferenceID/join" in out
        assert "opened   /courses/1/conferences/2/join" in out

    def test_disable_feature(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/courses", "--disable", "native_dashboard"])
        assert "Helm" in capsys.readouterr().out

    def test_precedence_override(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        table = RouteTable()
        table.add("/users/:id", lambda u, p, c: "generic")
        table.add("/users/me", lambda u, p, c: "me")
        mod = types.ModuleType("_fake_waypoint_table")
        mod.table = table  # type: ignore[attr-defined]
        monkeypatch.setitem(__import__("sys").modules, "_fake_waypoint_table", mod)

        main(["match", "/users/me", "--table", "_fake_waypoint_table:table",
              "--precedence", "specificity"])
        assert "screen   'me'" in capsys.readouterr().out
