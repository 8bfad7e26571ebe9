"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from synergym.cli import main
from synergym.clients import HttpCoachClient
from synergym.errors import UpstreamError
from synergym.models import CoachResponse


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def initialized(runner):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return result


class TestInit:
    def test_init_seeds_catalog(self, initialized, runner):
        assert "8 exercises" in initialized.output

        again = runner.invoke(main, ["init"])
        assert again.exit_code == 0
        assert "already populated" in again.output

    def test_commands_require_init(self, runner):
        result = runner.invoke(main, ["exercises", "list"])
        assert result.exit_code == 1
        assert "synergym init" in result.output


class TestCatalogCommands:
    def test_list_and_show(self, initialized, runner):
        listed = runner.invoke(main, ["exercises", "list", "--category", "Core"])
        assert "Plank" in listed.output
        assert "Squat" not in listed.output

        shown = runner.invoke(main, ["exercises", "show", "1"])
        assert shown.exit_code == 0
        assert "Squat" in shown.output
        assert "Likes:      0" in shown.output

    def test_show_missing(self, initialized, runner):
        result = runner.invoke(main, ["exercises", "show", "999"])
        assert result.exit_code == 1
        assert "Exercise not found: 999" in result.output


class TestRoutineCommands:
    """Tests for the routine workflow from the command line."""

    def test_create_show_delete(self, initialized, runner):
        runner.invoke(main, ["users", "add", "kim@example.com", "Kim"])

        created = runner.invoke(
            main, ["routines", "create", "Leg Day", "--user", "1", "-e", "3", "-e", "1"]
        )
        assert created.exit_code == 0, created.output
        assert "1. Deadlift" in created.output
        assert "2. Squat" in created.output

        added = runner.invoke(main, ["routines", "add-exercise", "1", "4", "--order", "0"])
        assert added.exit_code == 0, added.output

        shown = runner.invoke(main, ["routines", "show", "1"])
        assert "1. Plank" in shown.output
        assert "3. Squat" in shown.output

        deleted = runner.invoke(main, ["routines", "delete", "1", "--yes"])
        assert deleted.exit_code == 0
        assert runner.invoke(main, ["routines", "show", "1"]).exit_code == 1

    def test_create_for_unknown_user(self, initialized, runner):
        result = runner.invoke(main, ["routines", "create", "Legs", "--user", "9"])
        assert result.exit_code == 1
        assert "User not found: 9" in result.output


class TestLikeCommands:
    def test_like_and_unlike(self, initialized, runner):
        runner.invoke(main, ["users", "add", "kim@example.com", "Kim"])

        assert runner.invoke(main, ["likes", "add", "1", "1"]).exit_code == 0
        duplicate = runner.invoke(main, ["likes", "add", "1", "1"])
        assert duplicate.exit_code == 1

        listed = runner.invoke(main, ["likes", "list", "--exercise", "1"])
        assert listed.exit_code == 0
        assert "User" in listed.output

        assert "no longer likes" in runner.invoke(main, ["likes", "remove", "1", "1"]).output
        assert "did not like" in runner.invoke(main, ["likes", "remove", "1", "1"]).output

    def test_list_needs_one_filter(self, initialized, runner):
        assert runner.invoke(main, ["likes", "list"]).exit_code == 1


class TestCoachCommand:
    def test_ask(self, runner, monkeypatch):
        seen = []

        async def fake_ask(self, payload):
            seen.append(payload)
            return CoachResponse(response="Slow down the eccentric", exercise_info={"sets": 3})

        monkeypatch.setattr(HttpCoachClient, "ask", fake_ask)

        result = runner.invoke(
            main, ["coach", "ask", "Bench tips?", "-u", "2", "--extra", '{"level": "novice"}']
        )

        assert result.exit_code == 0, result.output
        assert "Slow down the eccentric" in result.output
        assert "sets: 3" in result.output
        assert seen == [{"message": "Bench tips?", "user_id": 2, "level": "novice"}]

    def test_ask_upstream_failure(self, runner, monkeypatch):
        async def failing_ask(self, payload):
            raise UpstreamError("AI coach is not available at http://127.0.0.1:8000")

        monkeypatch.setattr(HttpCoachClient, "ask", failing_ask)

        result = runner.invoke(main, ["coach", "ask", "hello"])
        assert result.exit_code == 1
        assert "not available" in result.output

    def test_ask_rejects_bad_extra(self, runner):
        result = runner.invoke(main, ["coach", "ask", "hello", "--extra", "[1]"])
        assert result.exit_code == 1
        assert "JSON object" in result.output
