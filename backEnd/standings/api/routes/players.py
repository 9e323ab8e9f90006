"""Players endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends

from ...cache.store import CacheStore
from ...config.settings import Settings
from ...query.views import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, parse_positive_int, players_view
from ..deps import format_timestamp, get_app_settings, get_store, page_envelope


router = APIRouter(prefix="/api/players", tags=["players"])


@router.get("")
async def list_players(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    q: Optional[str] = None,
    store: CacheStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Registered players, optionally filtered by summoner name substring."""
    result = players_view(
        store.players(),
        q=q,
        page=parse_positive_int(page, DEFAULT_PAGE),
        page_size=min(parse_positive_int(limit, DEFAULT_PAGE_SIZE), settings.max_page_size),
    )
    body = page_envelope(result)
    body["lastUpdated"] = format_timestamp(store.last_sync)
    return body
