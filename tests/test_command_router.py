import pytest

from command_router import DAILY, LOOKUP, MONTHLY, USAGE, WEEKLY, Route, route_command


@pytest.mark.parametrize("text,action", [
    ("!leaderd", DAILY),
    ("!LeaderboardDaily", DAILY),
    ("!leaderw", WEEKLY),
    ("!leaderboardWeekly", WEEKLY),
    ("!leaderm", MONTHLY),
    ("!leaderboardMonthly", MONTHLY),
    ("!leaderboardMontly", MONTHLY),
])
def test_leaderboard_commands(text, action):
    assert route_command(text) == Route(action, "")


def test_weekly_ignores_extra_text():
    assert route_command("!leaderw please") == Route(WEEKLY, "")


def test_lookup_joins_argument():
    assert route_command("!lookup Jon Doe") == Route(LOOKUP, "Jon Doe")
    assert route_command("!lookup   Jon    Doe ") == Route(LOOKUP, "Jon Doe")


def test_lookup_without_argument():
    assert route_command("!lookup") == Route(LOOKUP, "")


def test_unknown_leader_command_gets_usage():
    assert route_command("!leaderboardYearly") == Route(USAGE, "")


def test_ignored_messages():
    assert route_command("hello there") is None
    assert route_command("") is None
    assert route_command("  ") is None
    assert route_command("!dice") is None
    assert route_command("!leaderd", author_is_bot=True) is None
    # no fuzzy matching
    assert route_command("!leaderdd") == Route(USAGE, "")
    assert route_command("!lookups Jon") is None


def test_custom_prefix():
    assert route_command("?leaderd", prefix="?") == Route(DAILY, "")
    assert route_command("!leaderd", prefix="?") is None
