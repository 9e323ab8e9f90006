"""Lobby assignment endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...cache.store import CacheStore
from ...config.settings import Settings
from ...schemas.lobby import DayLobbies
from ...query.views import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    lobby_search,
    paginate,
    parse_positive_int,
)
from ..deps import get_app_settings, get_store, page_envelope


router = APIRouter(prefix="/api/lobbies", tags=["lobbies"])

DAY_SELECTORS = {"1": 1, "2": 2}


@router.get("/search")
async def search_lobbies(
    day: Optional[str] = None,
    round_number: Optional[str] = Query(None, alias="round"),
    lobby: Optional[str] = None,
    name: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: CacheStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Flat, paginated list of lobby seats matching the filters."""
    if day in DAY_SELECTORS:
        days = [store.day_lobbies(DAY_SELECTORS[day])]
    else:
        days = [store.day_lobbies(1), store.day_lobbies(2)]

    slots = lobby_search(
        days,
        round_number=parse_positive_int(round_number, 0) or None,
        lobby=lobby,
        name=name,
    )
    result = paginate(
        slots,
        parse_positive_int(page, DEFAULT_PAGE),
        min(parse_positive_int(limit, DEFAULT_PAGE_SIZE), settings.max_page_size),
    )
    return page_envelope(result)


@router.get("/{day}")
async def get_day_lobbies(day: str, store: CacheStore = Depends(get_store)):
    """Full lobby tree for day "1" or "2"; an empty tree until first loaded."""
    selected = DAY_SELECTORS.get(day)
    if selected is None:
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": f"No lobby data for day '{day}'"},
        )
    result = store.day_lobbies(selected) or DayLobbies(day=selected)
    return {"success": True, "data": result.model_dump(by_alias=True, mode="json")}
