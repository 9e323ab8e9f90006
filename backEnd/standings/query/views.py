"""
Query layer: filter, rank, and paginate cached snapshots on demand.

Views never modify the snapshots they read. Leaderboard views re-rank the
filtered subset with the full tie-break cascade, so positions describe rank
within the result, not within the whole leaderboard.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TypeVar

from ..ranking.engine import (
    DEFAULT_ORDER,
    DEFAULT_SORT_KEY,
    normalize_order,
    normalize_sort_key,
    rank_entries,
)
from ..schemas.lobby import DayLobbies, LobbySlot
from ..schemas.page import Page, PageMeta
from ..schemas.standings import LeaderboardEntry, Player


T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse a decimal query value; absent, non-numeric or < 1 gives ``default``."""
    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    return number if number >= 1 else default


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a numeric query value, None when absent or unparsable."""
    if value is None or not str(value).strip():
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class PageRequest:
    """Normalized leaderboard query."""

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    name: Optional[str] = None
    min_point: Optional[float] = None
    sort_by: str = DEFAULT_SORT_KEY
    order: str = DEFAULT_ORDER

    @classmethod
    def from_query(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        name: Optional[str] = None,
        min_point: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        max_page_size: int = MAX_PAGE_SIZE,
        default_sort_by: str = DEFAULT_SORT_KEY,
    ) -> "PageRequest":
        """Build a request from raw query-string values, applying defaults."""
        return cls(
            page=parse_positive_int(page, DEFAULT_PAGE),
            page_size=min(parse_positive_int(limit, DEFAULT_PAGE_SIZE), max_page_size),
            name=(name or "").strip() or None,
            min_point=parse_float(min_point),
            sort_by=normalize_sort_key(sort_by or default_sort_by),
            order=normalize_order(order),
        )


def paginate(items: Sequence[T], page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """Slice one page out of ``items`` and describe the whole set."""
    total = len(items)
    start = (page - 1) * page_size
    meta = PageMeta(
        total=total,
        current_page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )
    return Page(items=list(items[start:start + page_size]), meta=meta)


def filter_entries(
    entries: Iterable[LeaderboardEntry],
    name: Optional[str] = None,
    min_point: Optional[float] = None,
) -> list[LeaderboardEntry]:
    needle = name.lower() if name else None
    result = []
    for entry in entries:
        if needle and needle not in entry.name.lower():
            continue
        if min_point is not None and entry.total_point < min_point:
            continue
        result.append(entry)
    return result


def leaderboard_view(entries: Iterable[LeaderboardEntry], request: PageRequest) -> Page:
    """Filter, re-rank with the cascade, relabel positions, then paginate."""
    filtered = filter_entries(entries, request.name, request.min_point)
    ranked = rank_entries(filtered, sort_by=request.sort_by, order=request.order)
    return paginate(ranked, request.page, request.page_size)


def players_view(
    players: Iterable[Player],
    q: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """Players whose summoner name contains ``q`` (case-insensitive), paginated."""
    needle = (q or "").strip().lower()
    matched = [p for p in players if needle in p.summoner_name.lower()]
    return paginate(matched, page, page_size)


def top_performers(entries: Sequence[LeaderboardEntry], n: int = 3) -> list[LeaderboardEntry]:
    """Leading entries of an already ranked leaderboard."""
    return list(entries[:n])


def lobby_search(
    days: Iterable[Optional[DayLobbies]],
    round_number: Optional[int] = None,
    lobby: Optional[str] = None,
    name: Optional[str] = None,
) -> list[LobbySlot]:
    """
    Flatten lobby trees into seats matching every given filter.

    Empty seats only appear when no name filter is given.
    """
    needle = name.lower() if name else None
    slots = []
    for day in days:
        if day is None:
            continue
        for rnd in day.rounds:
            if round_number is not None and rnd.round_number != round_number:
                continue
            for lob in _matching_lobbies(rnd.lobbies, lobby):
                for member in lob.members:
                    if needle is not None and needle not in member.name.lower():
                        continue
                    slots.append(
                        LobbySlot(day=day.day, round=rnd.round_number, lobby=lob.lobby_name, player=member.name)
                    )
    return slots


def _matching_lobbies(lobbies, label: Optional[str]):
    if not label:
        return lobbies
    return [lob for lob in lobbies if label.lower() in lob.lobby_name.lower()]
