"""
leaderboard_parser.py

Helpers to turn the tracker site's `/api/leaderboard` response into
records ready for Discord embed formatting.

The API has changed shape more than once, so nothing here assumes a
schema: the entry list may be the payload itself or sit under one of
several wrapper keys, and every field has a list of candidate names.

Public functions:
- read_field(record, accessors, default=None) -> Any
- resolve_entries(payload) -> ResolvedEntries
- normalize_leaderboard(payload, limit=3) -> List[PlayerRecord]

Example payload accepted:
{
  "players": [ {"name": "Ann", "killsChange": 5}, {"name": "Bo", "killsChange": 9} ]
}
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union
import logging

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

# Keys tried, in order, when the payload is an object instead of a list
WRAPPER_KEYS = ("entries", "players", "leaderboard", "data", "results")

USERNAME_KEYS = ("username", "name", "playerName", "player")
DELTA_KEYS = ("killsGained", "killsChange", "kills_gained", "killsDelta", "delta")
TOTAL_KILLS_KEYS = ("kills", "totalKills", "total_kills")
TOTAL_DEATHS_KEYS = ("deaths", "totalDeaths", "total_deaths")
KDR_KEYS = ("kdr", "kd", "killDeathRatio")
ELO_KEYS = ("elo", "rating")

Accessor = Union[str, int]


@dataclass
class PlayerRecord:
    username: str = UNKNOWN
    period_kills_delta: int = 0
    total_kills: Optional[Any] = None
    total_deaths: Optional[Any] = None
    kdr: Optional[Any] = None
    streak: Optional[str] = None
    elo: Optional[str] = None
    mode: Optional[str] = None
    source_url: Optional[str] = None


@dataclass
class ResolvedEntries:
    """Which payload shape was found, and the entries under it.

    shape is one of "bare", "wrapped" or "unknown"; key is set only
    for "wrapped".
    """
    shape: str
    entries: List[Any] = field(default_factory=list)
    key: Optional[str] = None


def read_field(record: Any, accessors: Sequence[Accessor], default: Any = None) -> Any:
    """Return the first non-None value found under `accessors`.

    String accessors look up mapping keys, integer accessors index into
    sequences. Falsy values such as 0 or "" are returned as found; only
    a missing key, an out-of-range index or an explicit None fall
    through to the next accessor.
    """
    for acc in accessors:
        value = None
        if isinstance(record, Mapping):
            if acc in record:
                value = record[acc]
        elif isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
            if isinstance(acc, int) and 0 <= acc < len(record):
                value = record[acc]
        if value is not None:
            return value
    return default


def resolve_entries(payload: Any) -> ResolvedEntries:
    if isinstance(payload, list):
        return ResolvedEntries(shape="bare", entries=payload)
    if isinstance(payload, Mapping):
        for key in WRAPPER_KEYS:
            if isinstance(payload.get(key), list):
                return ResolvedEntries(shape="wrapped", entries=payload[key], key=key)
    return ResolvedEntries(shape="unknown")


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(float(str(value).replace(',', '').strip()))
    except (TypeError, ValueError, OverflowError):
        return 0


def _username(entry: Mapping[str, Any]) -> str:
    name = read_field(entry, USERNAME_KEYS)
    if name is None:
        return UNKNOWN
    name = str(name).strip()
    return name or UNKNOWN


def _to_record(entry: Mapping[str, Any], delta: int) -> PlayerRecord:
    return PlayerRecord(
        username=_username(entry),
        period_kills_delta=delta,
        total_kills=read_field(entry, TOTAL_KILLS_KEYS),
        total_deaths=read_field(entry, TOTAL_DEATHS_KEYS),
        kdr=read_field(entry, KDR_KEYS),
        elo=read_field(entry, ELO_KEYS),
    )


def normalize_leaderboard(payload: Any, limit: int = 3) -> List[PlayerRecord]:
    """Top `limit` players by kills gained in the period.

    Players with no gain (zero, negative or missing delta) are left out.
    Ties keep the order the API returned them in.
    """
    resolved = resolve_entries(payload)
    if resolved.shape == "unknown":
        logger.warning(f"Leaderboard payload has no recognizable entry list (type={type(payload).__name__})")
        return []
    logger.debug(f"Leaderboard payload shape={resolved.shape} key={resolved.key} entries={len(resolved.entries)}")

    ranked: List[Tuple[int, Mapping[str, Any]]] = []
    for entry in resolved.entries:
        if not isinstance(entry, Mapping):
            continue
        delta = _as_int(read_field(entry, DELTA_KEYS, 0))
        if delta > 0:
            ranked.append((delta, entry))

    # sorted() is stable, so equal deltas keep their input order
    ranked = sorted(ranked, key=lambda pair: pair[0], reverse=True)
    return [_to_record(entry, delta) for delta, entry in ranked[:limit]]
