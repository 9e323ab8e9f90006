"""
Tabular record parsing.

Sheets exported for humans carry banners and notes above the real header, and
columns get reordered by organisers. The parser therefore finds the header
row by content, maps recognised headers to column indexes by name, and reads
every later row with a non-empty name as one record.
"""

import logging
import math
from typing import Mapping, Optional, Sequence, Union

from ..errors import HeaderNotFound
from ..schemas.standings import PLACEMENT_SLOTS, LeaderboardEntry, Player
from .grid import Grid


logger = logging.getLogger(__name__)

ColumnIndex = dict[str, Optional[int]]

MATCH_COLUMNS = tuple(f"m{i}" for i in range(1, PLACEMENT_SLOTS + 1))

LEADERBOARD_COLUMNS = (
    "position",
    "prize",
    "name",
    *MATCH_COLUMNS,
    "total",
    "total point",
)

PLAYER_COLUMNS = ("summoner name", "rank points", "email")


def _normalize(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def to_number(value: Optional[str]) -> Union[int, float]:
    """
    Coerce a cell to a number, never failing.

    Blank, non-numeric, NaN and infinite values become 0. Integral values are
    returned as int so they serialize without a trailing ".0".
    """
    text = (value or "").strip()
    if not text:
        return 0
    try:
        number = float(text)
    except ValueError:
        return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


def to_placement(value: Optional[str]) -> int:
    """Coerce a cell to a placement integer (0 when absent or fractional)."""
    number = to_number(value)
    return number if isinstance(number, int) else 0


def locate_header(grid: Grid, key: str = "name") -> int:
    """
    Find the first row containing a cell equal to ``key``.

    Comparison is trimmed and case-insensitive.

    Raises:
        HeaderNotFound: If no row contains the key
    """
    wanted = _normalize(key)
    for index, row in enumerate(grid):
        if any(_normalize(value) == wanted for value in row):
            return index
    raise HeaderNotFound(key)


def build_column_index(header_row: Sequence[str], recognized: Sequence[str] = LEADERBOARD_COLUMNS) -> ColumnIndex:
    """Map each recognised header to its first column index, or None if absent."""
    normalized = [_normalize(value) for value in header_row]
    index: ColumnIndex = {}
    for name in recognized:
        index[name] = normalized.index(name) if name in normalized else None
    return index


def _text(row: Sequence[str], columns: Mapping[str, Optional[int]], name: str) -> str:
    col = columns.get(name)
    if col is None or col >= len(row):
        return ""
    return (row[col] or "").strip()


def extract_records(grid: Grid, header_index: int, columns: ColumnIndex) -> list[LeaderboardEntry]:
    """
    Read leaderboard rows below the header.

    Rows with an empty name are padding and are dropped. The source position
    is kept as read; the ranking engine replaces it.
    """
    entries: list[LeaderboardEntry] = []
    for row in grid[header_index + 1:]:
        name = _text(row, columns, "name")
        if not name:
            continue
        entries.append(
            LeaderboardEntry(
                position=_text(row, columns, "position"),
                prize=_text(row, columns, "prize"),
                name=name,
                matches=[to_placement(_text(row, columns, col)) for col in MATCH_COLUMNS],
                total=to_number(_text(row, columns, "total")),
                total_point=to_number(_text(row, columns, "total point")),
            )
        )
    return entries


def parse_leaderboard(grid: Grid) -> list[LeaderboardEntry]:
    """Locate the header and extract every leaderboard record from a grid."""
    header_index = locate_header(grid, "name")
    columns = build_column_index(grid[header_index], LEADERBOARD_COLUMNS)
    missing = [name for name, col in columns.items() if col is None]
    if missing:
        logger.warning(f"Leaderboard header row {header_index + 1} lacks columns: {', '.join(missing)}")
    return extract_records(grid, header_index, columns)


def extract_players(grid: Grid) -> list[Player]:
    """
    Read registered players from the players sheet.

    The summoner name is the unique key; later duplicates are dropped.
    """
    header_index = locate_header(grid, "summoner name")
    columns = build_column_index(grid[header_index], PLAYER_COLUMNS)

    players: list[Player] = []
    seen: set[str] = set()
    for row in grid[header_index + 1:]:
        summoner = _text(row, columns, "summoner name")
        if not summoner:
            continue
        if summoner in seen:
            logger.warning(f"Duplicate summoner name ignored: {summoner}")
            continue
        seen.add(summoner)
        players.append(
            Player(
                summoner_name=summoner,
                rank_points=to_number(_text(row, columns, "rank points")),
                email=_text(row, columns, "email"),
            )
        )
    return players
