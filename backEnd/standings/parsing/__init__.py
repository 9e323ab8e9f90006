"""Sheet parsing: CSV text -> grids -> typed records and lobby trees."""

from .grid import read_grid
from .records import (
    LEADERBOARD_COLUMNS,
    PLAYER_COLUMNS,
    build_column_index,
    extract_players,
    extract_records,
    locate_header,
    parse_leaderboard,
    to_number,
)
from .lobbies import decode_day, decode_days

__all__ = [
    "LEADERBOARD_COLUMNS",
    "PLAYER_COLUMNS",
    "build_column_index",
    "decode_day",
    "decode_days",
    "extract_players",
    "extract_records",
    "locate_header",
    "parse_leaderboard",
    "read_grid",
    "to_number",
]
