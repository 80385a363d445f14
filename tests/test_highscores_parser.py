from highscores_parser import extract_player_row, normalize_lookup

HIGHSCORES_HTML = """
<html><body>
<table class="highscores">
  <tr><th>Rank</th><th>Name</th><th>Mode</th><th>Kills</th><th>Deaths</th><th>KDR</th><th>Streak</th><th>Elo</th></tr>
  <tr><td>1</td><td> JonDoe </td><td>Normal</td><td>1,204</td><td>300</td><td>4.01</td><td>12</td><td>1650</td></tr>
  <tr><td>2</td><td>Jon</td><td>Ironman</td><td>50</td><td>10</td><td>5.00</td><td>0</td><td>1200</td></tr>
</table>
</body></html>
"""


def test_extract_player_row_returns_trimmed_cells():
    cells = extract_player_row(HIGHSCORES_HTML, "jondoe")
    assert cells == ["1", "JonDoe", "Normal", "1,204", "300", "4.01", "12", "1650"]


def test_extract_player_row_first_match_wins():
    # "Jon" is a substring of "JonDoe", which appears first
    cells = extract_player_row(HIGHSCORES_HTML, "JON")
    assert cells[1] == "JonDoe"


def test_extract_player_row_not_found():
    assert extract_player_row(HIGHSCORES_HTML, "ghost") is None
    assert extract_player_row("<p>no table here</p>", "JonDoe") is None
    assert extract_player_row(HIGHSCORES_HTML, "   ") is None


def test_normalize_lookup_maps_columns():
    cells = extract_player_row(HIGHSCORES_HTML, "JonDoe")
    record = normalize_lookup(cells, "jondoe", "https://spawnpk.net/highscores/index.php?name=jondoe")
    assert record.username == "JonDoe"
    assert record.mode == "Normal"
    assert record.total_kills == "1,204"
    assert record.total_deaths == "300"
    assert record.kdr == "4.01"
    assert record.streak == "12"
    assert record.elo == "1650"
    assert record.source_url.endswith("name=jondoe")


def test_normalize_lookup_short_row_uses_defaults():
    record = normalize_lookup(["1", "", "Normal"], "Ann")
    assert record.username == "Ann"
    assert record.mode == "Normal"
    assert record.total_kills == "?"
    assert record.elo == "?"


def test_normalize_lookup_empty_row():
    record = normalize_lookup([], "Ann")
    assert record.mode == "Unknown"
    assert record.streak == "?"


def test_normalize_lookup_custom_columns():
    record = normalize_lookup(["Ann", "99"], "ann", columns={"username": 0, "kills": 1})
    assert record.username == "Ann"
    assert record.total_kills == "99"
    assert record.kdr == "?"


def test_extract_player_row_skips_header_row():
    # "kills" and "name" only appear in the <th> header
    assert extract_player_row(HIGHSCORES_HTML, "kills") is None
    assert extract_player_row(HIGHSCORES_HTML, "Name") is None
