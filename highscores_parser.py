"""
highscores_parser.py

Parse the SpawnPK highscores search page into a PlayerRecord.

Public functions:
- extract_player_row(html, username) -> list[str] | None
- normalize_lookup(cells, username, source_url) -> PlayerRecord
"""
from typing import List, Mapping, Optional
from bs4 import BeautifulSoup

from bot_config import LOOKUP_COLUMNS
from leaderboard_parser import UNKNOWN, PlayerRecord, read_field

UNKNOWN_VALUE = "?"
UNKNOWN_MODE = UNKNOWN


def extract_player_row(html: str, username: str) -> Optional[List[str]]:
    """Return the cell texts of the first table row mentioning `username`.

    Matching is a case-insensitive substring test on the row's text, so
    "Jon" also matches "Jonny" if that row comes first. Returns None
    when no row matches.
    """
    needle = (username or "").strip().lower()
    if not needle:
        return None

    soup = BeautifulSoup(html or "", "html.parser")
    for tr in soup.find_all("tr"):
        tds = tr.find_all("td")
        # header rows only have <th> cells
        if not tds:
            continue
        if needle in tr.get_text(" ", strip=True).lower():
            return [td.get_text(" ", strip=True) for td in tds]
    return None


def normalize_lookup(cells: List[str], username: str, source_url: Optional[str] = None,
                     columns: Mapping[str, int] = LOOKUP_COLUMNS) -> PlayerRecord:
    # blank cells count as missing
    row = [c if c else None for c in cells]

    def cell(name: str, default: str) -> str:
        pos = columns.get(name)
        if pos is None:
            return default
        return read_field(row, (pos,), default)

    return PlayerRecord(
        username=cell("username", (username or "").strip() or UNKNOWN),
        mode=cell("mode", UNKNOWN_MODE),
        total_kills=cell("kills", UNKNOWN_VALUE),
        total_deaths=cell("deaths", UNKNOWN_VALUE),
        kdr=cell("kdr", UNKNOWN_VALUE),
        streak=cell("streak", UNKNOWN_VALUE),
        elo=cell("elo", UNKNOWN_VALUE),
        source_url=source_url,
    )
