"""
Lobby grid decoding.

The lobby sheet is laid out positionally: each day occupies its own column
band, each round a column within it (every ``round_col_step`` columns), and
each lobby a block of ``lobby_row_step`` rows (a title row followed by the
member rows). Addresses are computed from the layout; nothing is searched.
"""

from ..config.settings import LobbyLayout
from ..schemas.lobby import DayLobbies, Lobby, LobbyMember, Round
from .grid import Grid, cell


def member_address(layout: LobbyLayout, day: int, round_index: int, lobby_index: int, member_index: int) -> tuple[int, int]:
    """(row, col) of one member cell, all indexes 0-based."""
    row = layout.player_start_row + lobby_index * layout.lobby_row_step + member_index
    col = layout.day_start_col(day) + round_index * layout.round_col_step
    return row, col


def decode_day(grid: Grid, day: int, layout: LobbyLayout) -> DayLobbies:
    """
    Decode one day's rounds from the grid.

    Addresses outside the grid decode to empty member names.
    """
    rounds = []
    for round_index in range(layout.rounds_per_day):
        lobbies = []
        for lobby_index in range(layout.lobbies_per_round):
            members = []
            for member_index in range(layout.members_per_lobby):
                row, col = member_address(layout, day, round_index, lobby_index, member_index)
                members.append(LobbyMember(name=cell(grid, row, col)))
            lobbies.append(Lobby(lobby_name=f"Lobby {lobby_index + 1}", members=members))
        rounds.append(Round(round_number=round_index + 1, lobbies=lobbies))
    return DayLobbies(day=day, rounds=rounds)


def decode_days(grid: Grid, layout: LobbyLayout) -> tuple[DayLobbies, DayLobbies]:
    """Decode both tournament days from their column bands."""
    return decode_day(grid, 1, layout), decode_day(grid, 2, layout)
