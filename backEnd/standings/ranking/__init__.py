"""Leaderboard ranking with the placement tie-break cascade."""

from .engine import (
    SORT_KEYS,
    assign_positions,
    compare_entries,
    rank_entries,
    sort_entries,
)

__all__ = [
    "SORT_KEYS",
    "assign_positions",
    "compare_entries",
    "rank_entries",
    "sort_entries",
]
