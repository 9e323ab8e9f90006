"""
Refresh pipelines, one per data set.

Each pipeline fetches its sheet, parses it, ranks it where applicable, and
returns the complete new snapshot. Pipelines never touch the cache; staging
is the orchestrator's job.
"""

import logging
from typing import Awaitable, Callable, Sequence

from ..cache.store import DataSet
from ..config.settings import LobbyLayout, Settings
from ..parsing.grid import read_grid
from ..parsing.lobbies import decode_day
from ..parsing.records import extract_players, parse_leaderboard
from ..ranking.engine import rank_entries
from ..schemas.lobby import DayLobbies
from ..schemas.standings import LeaderboardEntry, Player
from .client import SheetClient


logger = logging.getLogger(__name__)

Pipeline = Callable[[], Awaitable[Sequence]]


async def load_players(client: SheetClient, url: str) -> list[Player]:
    text = await client.fetch_text(url)
    players = extract_players(read_grid(text))
    logger.info(f"Players: loaded {len(players)} players")
    return players


async def load_leaderboard(client: SheetClient, url: str, sort_by: str) -> list[LeaderboardEntry]:
    text = await client.fetch_text(url)
    entries = rank_entries(parse_leaderboard(read_grid(text)), sort_by=sort_by, order="desc")
    logger.info(f"Leaderboard: ranked {len(entries)} entries by {sort_by}")
    return entries


async def load_day_lobbies(client: SheetClient, url: str, day: int, layout: LobbyLayout) -> list[DayLobbies]:
    text = await client.fetch_text(url)
    # Blank rows are kept: member cells are addressed by row offset
    day_lobbies = decode_day(read_grid(text, skip_empty_rows=False), day, layout)
    logger.info(f"Lobbies: decoded day {day} ({len(day_lobbies.rounds)} rounds)")
    return [day_lobbies]


def build_pipelines(client: SheetClient, settings: Settings) -> dict[DataSet, Pipeline]:
    """Wire one pipeline per data set from the configured sheet URLs."""
    layout = settings.lobby_layout()
    sort_by = settings.default_sort_by

    return {
        DataSet.PLAYERS: lambda: load_players(client, settings.players_sheet_url),
        DataSet.LEADERBOARD: lambda: load_leaderboard(client, settings.leaderboard_sheet_url, sort_by),
        DataSet.LEADERBOARD2: lambda: load_leaderboard(client, settings.resolved_leaderboard2_url(), sort_by),
        DataSet.LOBBIES_DAY1: lambda: load_day_lobbies(client, settings.lobbies_sheet_url, 1, layout),
        DataSet.LOBBIES_DAY2: lambda: load_day_lobbies(client, settings.lobbies_sheet_url, 2, layout),
    }
