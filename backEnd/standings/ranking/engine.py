"""
Leaderboard ranking engine.

Entries are ordered by a cascade of comparisons, each consulted only when all
previous ones tie:

1. Primary aggregate (``total`` or ``totalPoint``), higher first
2. The other aggregate, higher first
3. Weighted finishes: 2 x wins + top-4 finishes, higher first
4. Placement distribution: more 1st places, then more 2nd places, ... 8th
5. Most recent placement: the lower last non-zero placement wins; an entry
   that never played counts as having finished 9th

Positions are then relabelled "1".."N" from the final order; positions read
from the sheet are never trusted.
"""

from functools import cmp_to_key
from typing import Iterable, Optional, Sequence

from ..schemas.standings import LeaderboardEntry


SORT_KEYS = ("total", "totalPoint")
ORDERS = ("asc", "desc")

DEFAULT_SORT_KEY = "totalPoint"
DEFAULT_ORDER = "desc"

WORST_PLACEMENT = 8
NO_PLACEMENT = WORST_PLACEMENT + 1


def _sign(value) -> int:
    return (value > 0) - (value < 0)


def weighted_finishes(matches: Sequence[int]) -> int:
    """2 points per win plus 1 per top-4 finish (wins included)."""
    wins = sum(1 for p in matches if p == 1)
    top4 = sum(1 for p in matches if 1 <= p <= 4)
    return 2 * wins + top4


def last_placement(matches: Sequence[int]) -> int:
    """Most recent non-zero placement, or NO_PLACEMENT if none was played."""
    for p in reversed(matches):
        if p != 0:
            return p
    return NO_PLACEMENT


def normalize_sort_key(sort_by: Optional[str]) -> str:
    return sort_by if sort_by in SORT_KEYS else DEFAULT_SORT_KEY


def normalize_order(order: Optional[str]) -> str:
    order = (order or "").lower()
    return order if order in ORDERS else DEFAULT_ORDER


def compare_entries(a: LeaderboardEntry, b: LeaderboardEntry, sort_by: str = DEFAULT_SORT_KEY) -> int:
    """
    Compare two entries for descending rank order.

    Returns a negative number when ``a`` ranks above ``b``, positive when
    below, and 0 when every level of the cascade ties.
    """
    primary = normalize_sort_key(sort_by)
    secondary = "total" if primary == "totalPoint" else "totalPoint"

    # Levels 1 and 2: aggregates, higher first
    for key in (primary, secondary):
        diff = _sign(b.metric(key) - a.metric(key))
        if diff:
            return diff

    # Level 3: weighted finishes, higher first
    diff = _sign(weighted_finishes(b.matches) - weighted_finishes(a.matches))
    if diff:
        return diff

    # Level 4: placement counts from 1st down to 8th, more first
    for rank in range(1, WORST_PLACEMENT + 1):
        diff = _sign(b.matches.count(rank) - a.matches.count(rank))
        if diff:
            return diff

    # Level 5: better most recent placement first
    return _sign(last_placement(a.matches) - last_placement(b.matches))


def sort_entries(
    entries: Iterable[LeaderboardEntry],
    sort_by: str = DEFAULT_SORT_KEY,
    order: str = DEFAULT_ORDER,
) -> list[LeaderboardEntry]:
    """
    Sort entries with the full cascade.

    ``order="asc"`` inverts the whole comparison, tie-breaks included.
    """
    primary = normalize_sort_key(sort_by)
    direction = -1 if normalize_order(order) == "asc" else 1
    return sorted(
        entries,
        key=cmp_to_key(lambda a, b: direction * compare_entries(a, b, primary)),
    )


def assign_positions(entries: Iterable[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Relabel positions "1".."N" in iteration order (copies; inputs untouched)."""
    return [
        entry.model_copy(update={"position": str(index)})
        for index, entry in enumerate(entries, start=1)
    ]


def rank_entries(
    entries: Iterable[LeaderboardEntry],
    sort_by: str = DEFAULT_SORT_KEY,
    order: str = DEFAULT_ORDER,
) -> list[LeaderboardEntry]:
    """Sort with the cascade and assign contiguous positions."""
    return assign_positions(sort_entries(entries, sort_by, order))
