"""Map chat text to a bot action.

Only an explicit set of spellings is accepted; there is no fuzzy
matching. "montly" is kept because players kept typing it.
"""
from typing import NamedTuple, Optional

DAILY = "daily"
WEEKLY = "weekly"
MONTHLY = "monthly"
LOOKUP = "lookup"
USAGE = "usage"

LEADERBOARD_ACTIONS = (DAILY, WEEKLY, MONTHLY)

# command token (without prefix, lower-case) -> action
COMMANDS = {
    "leaderd": DAILY,
    "leaderboarddaily": DAILY,
    "leaderw": WEEKLY,
    "leaderboardweekly": WEEKLY,
    "leaderm": MONTHLY,
    "leaderboardmonthly": MONTHLY,
    "leaderboardmontly": MONTHLY,
    "lookup": LOOKUP,
}


class Route(NamedTuple):
    action: str
    argument: str = ""


def route_command(text: str, prefix: str = "!", author_is_bot: bool = False) -> Optional[Route]:
    """Return the Route for `text`, or None when the bot should stay quiet.

    Unknown commands that start with "leader" get a USAGE route so the
    user sees the accepted spellings.
    """
    if author_is_bot or not text or not text.startswith(prefix):
        return None

    parts = text.strip().split()
    if not parts:
        return None
    token = parts[0][len(prefix):].lower()

    action = COMMANDS.get(token)
    if action == LOOKUP:
        return Route(LOOKUP, " ".join(parts[1:]))
    if action is not None:
        return Route(action)
    if token.startswith("leader"):
        return Route(USAGE)
    return None
