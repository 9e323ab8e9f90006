"""Pydantic schemas for the standings data sets."""

from .standings import LeaderboardEntry, Player, PLACEMENT_SLOTS
from .lobby import DayLobbies, Lobby, LobbyMember, LobbySlot, Round
from .page import Page, PageMeta

__all__ = [
    "DayLobbies",
    "LeaderboardEntry",
    "Lobby",
    "LobbyMember",
    "LobbySlot",
    "Page",
    "PageMeta",
    "Player",
    "PLACEMENT_SLOTS",
    "Round",
]
