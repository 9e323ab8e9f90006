"""Read-only views over cached snapshots."""

from .views import (
    PageRequest,
    leaderboard_view,
    lobby_search,
    paginate,
    parse_positive_int,
    players_view,
    top_performers,
)

__all__ = [
    "PageRequest",
    "leaderboard_view",
    "lobby_search",
    "paginate",
    "parse_positive_int",
    "players_view",
    "top_performers",
]
