import pytest

from pullsbot import teams
from pullsbot.errors import TeamAlreadyExists, TeamNotFound


def test_create_team_starts_empty(brain):
    teams.create_team(brain, "infra")
    assert teams.get_snippets(brain, "infra") == []


def test_create_existing_team_fails(brain):
    teams.create_team(brain, "infra")
    with pytest.raises(TeamAlreadyExists):
        teams.create_team(brain, "infra")


def test_non_list_value_counts_as_missing(brain, collection):
    collection.docs.append({"key": "infra", "snippets": "alice"})
    assert teams.team_exists(brain, "infra") is False
    with pytest.raises(TeamNotFound):
        teams.get_snippets(brain, "infra")


def test_add_snippet_is_idempotent(brain):
    teams.create_team(brain, "infra")
    teams.add_snippet(brain, "infra", "alice")
    teams.add_snippet(brain, "infra", "alice")
    assert teams.get_snippets(brain, "infra") == ["alice"]


def test_add_snippet_keeps_insertion_order(brain):
    teams.create_team(brain, "infra")
    teams.add_snippet(brain, "infra", "bob")
    teams.add_snippet(brain, "infra", "alice")
    assert teams.get_snippets(brain, "infra") == ["bob", "alice"]


def test_add_snippet_to_missing_team(brain):
    with pytest.raises(TeamNotFound):
        teams.add_snippet(brain, "infra", "alice")


def test_remove_absent_snippet_is_noop(brain):
    teams.create_team(brain, "infra")
    teams.add_snippet(brain, "infra", "alice")
    teams.remove_snippet(brain, "infra", "bob")
    assert teams.get_snippets(brain, "infra") == ["alice"]


def test_remove_snippet_exact_match_only(brain):
    teams.create_team(brain, "infra")
    teams.add_snippet(brain, "infra", "alice")
    teams.add_snippet(brain, "infra", "alice2")
    teams.remove_snippet(brain, "infra", "alice")
    assert teams.get_snippets(brain, "infra") == ["alice2"]


def test_remove_snippet_from_missing_team(brain):
    with pytest.raises(TeamNotFound):
        teams.remove_snippet(brain, "infra", "alice")


def test_remove_missing_team_is_noop(brain):
    teams.remove_team(brain, "ghost")
    assert teams.team_exists(brain, "ghost") is False


def test_rename_moves_snippets(brain):
    teams.create_team(brain, "infra")
    teams.add_snippet(brain, "infra", "alice")
    teams.rename_team(brain, "infra", "platform")
    assert teams.team_exists(brain, "infra") is False
    assert teams.get_snippets(brain, "platform") == ["alice"]


def test_rename_missing_team_fails(brain):
    with pytest.raises(TeamNotFound):
        teams.rename_team(brain, "infra", "platform")


def test_rename_onto_existing_team_fails(brain):
    teams.create_team(brain, "infra")
    teams.create_team(brain, "platform")
    with pytest.raises(TeamAlreadyExists) as exc:
        teams.rename_team(brain, "infra", "platform")
    assert exc.value.team == "platform"
    assert teams.get_snippets(brain, "infra") == []


def test_ensure_snippet_creates_entry(brain):
    teams.ensure_snippet(brain, "U123", "alice")
    teams.ensure_snippet(brain, "U123", "alice")
    assert teams.get_snippets(brain, "U123") == ["alice"]


def test_list_teams(brain):
    teams.create_team(brain, "web")
    teams.create_team(brain, "infra")
    assert teams.list_teams(brain) == ["infra", "web"]
