"""API route modules."""

from .health import router as health_router
from .leaderboard import router as leaderboard_router
from .lobbies import router as lobbies_router
from .players import router as players_router

__all__ = ["health_router", "leaderboard_router", "lobbies_router", "players_router"]
