"""Bot configuration.

Everything operator-controlled lives here and is read from the
environment (a local `.env` is loaded by app.py before this runs).

Only DISCORD_TOKEN is required. The highscores column layout is kept
as a constant so a markup change on the lookup site only needs an edit
here, not in the parser.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import os

DEFAULT_LEADERBOARD_BASE_URL = "https://v0-player-tracker-website.vercel.app"
DEFAULT_HIGHSCORES_URL = "https://spawnpk.net/highscores/index.php"

# Cell positions in a SpawnPK highscores row (0 is the rank column)
LOOKUP_COLUMNS = {
    'username': 1,
    'mode': 2,
    'kills': 3,
    'deaths': 4,
    'kdr': 5,
    'streak': 6,
    'elo': 7,
}

# Ranking windows understood by the leaderboard API
PERIODS = {
    'daily': '24h',
    'weekly': '7d',
    'monthly': '30d',
}

LEADERBOARD_SIZE = 3


class ConfigError(Exception):
    """Raised when the process cannot start with the given environment."""


@dataclass(frozen=True)
class Settings:
    token: str
    command_prefix: str = '!'
    leaderboard_base_url: str = DEFAULT_LEADERBOARD_BASE_URL
    highscores_url: str = DEFAULT_HIGHSCORES_URL
    http_timeout: float = 15.0
    log_level: str = 'INFO'
    health_server_enabled: bool = False
    port: int = 8080


def _flag(value: Optional[str]) -> bool:
    return (value or '').lower() in ('1', 'true', 'yes')


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Raises ConfigError when DISCORD_TOKEN is missing or a numeric
    variable cannot be parsed.
    """
    if env is None:
        env = os.environ

    token = (env.get('DISCORD_TOKEN') or '').strip()
    if not token:
        raise ConfigError(
            "DISCORD_TOKEN is not set. Add it to your environment or .env file."
        )

    return Settings(
        token=token,
        command_prefix=env.get('COMMAND_PREFIX') or '!',
        leaderboard_base_url=(env.get('LEADERBOARD_BASE_URL') or DEFAULT_LEADERBOARD_BASE_URL).rstrip('/'),
        highscores_url=env.get('HIGHSCORES_URL') or DEFAULT_HIGHSCORES_URL,
        http_timeout=_number(env, 'HTTP_TIMEOUT_SECONDS', 15.0, float),
        log_level=(env.get('LOG_LEVEL') or 'INFO').upper(),
        health_server_enabled=_flag(env.get('HEALTH_SERVER_ENABLED')),
        port=_number(env, 'PORT', 8080, int),
    )
