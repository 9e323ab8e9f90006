"""
Snapshot store for the mirrored data sets.

Each data set holds one immutable tuple that is replaced wholesale by a
single assignment, so readers on the event loop see either the previous or
the new snapshot, never a mix. The refresh orchestrator is the only writer.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Optional

from ..schemas.lobby import DayLobbies
from ..schemas.standings import LeaderboardEntry, Player


class DataSet(str, Enum):
    """Independently refreshed source mirrors."""

    PLAYERS = "players"
    LEADERBOARD = "leaderboard"
    LEADERBOARD2 = "leaderboard2"
    LOBBIES_DAY1 = "lobbies_day1"
    LOBBIES_DAY2 = "lobbies_day2"


class CacheStore:
    """Latest snapshot per data set plus the shared heartbeat timestamp."""

    def __init__(self):
        self._snapshots: dict[DataSet, tuple] = {data_set: () for data_set in DataSet}
        self._last_sync: Optional[datetime] = None

    def swap(self, data_set: DataSet, values: Iterable[Any]) -> None:
        """Replace a data set's snapshot."""
        self._snapshots[DataSet(data_set)] = tuple(values)

    def get(self, data_set: DataSet) -> tuple:
        """Current snapshot of a data set (empty until first success)."""
        return self._snapshots[DataSet(data_set)]

    def touch(self, when: Optional[datetime] = None) -> datetime:
        """Advance the heartbeat timestamp."""
        self._last_sync = when or datetime.now(timezone.utc)
        return self._last_sync

    @property
    def last_sync(self) -> Optional[datetime]:
        return self._last_sync

    # Typed accessors

    def players(self) -> tuple[Player, ...]:
        return self.get(DataSet.PLAYERS)

    def leaderboard(self, which: DataSet = DataSet.LEADERBOARD) -> tuple[LeaderboardEntry, ...]:
        if which not in (DataSet.LEADERBOARD, DataSet.LEADERBOARD2):
            raise ValueError(f"Not a leaderboard data set: {which}")
        return self.get(which)

    def day_lobbies(self, day: int) -> Optional[DayLobbies]:
        """Lobby tree for day 1 or 2, None before the first successful refresh."""
        data_set = {1: DataSet.LOBBIES_DAY1, 2: DataSet.LOBBIES_DAY2}.get(day)
        if data_set is None:
            raise ValueError(f"Unknown tournament day: {day}")
        snapshot = self.get(data_set)
        return snapshot[0] if snapshot else None

    def counts(self) -> dict[str, int]:
        """Number of records held per data set."""
        return {data_set.value: len(values) for data_set, values in self._snapshots.items()}
