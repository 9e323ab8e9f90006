"""Leaderboard endpoints for both leaderboard sheets."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...cache.store import CacheStore, DataSet
from ...config.settings import Settings
from ...query.views import PageRequest, leaderboard_view, top_performers
from ..deps import dump, format_timestamp, get_app_settings, get_store, page_envelope


router = APIRouter(prefix="/api", tags=["leaderboard"])


def _view(
    store: CacheStore,
    settings: Settings,
    data_set: DataSet,
    page: Optional[str],
    limit: Optional[str],
    sort_by: Optional[str],
    order: Optional[str],
    name: Optional[str] = None,
    min_point: Optional[str] = None,
) -> dict:
    request = PageRequest.from_query(
        page=page,
        limit=limit,
        name=name,
        min_point=min_point,
        sort_by=sort_by,
        order=order,
        max_page_size=settings.max_page_size,
        default_sort_by=settings.default_sort_by,
    )
    return page_envelope(leaderboard_view(store.leaderboard(data_set), request))


@router.get("/leaderboard/top-performers")
async def get_top_performers(store: CacheStore = Depends(get_store)):
    """Top three of each ranked leaderboard."""
    return {
        "success": True,
        "day1": dump(top_performers(store.leaderboard(DataSet.LEADERBOARD))),
        "day2": dump(top_performers(store.leaderboard(DataSet.LEADERBOARD2))),
        "lastUpdated": format_timestamp(store.last_sync),
    }


@router.get("/leaderboard/search")
async def search_leaderboard(
    name: Optional[str] = None,
    min_point: Optional[str] = Query(None, alias="minPoint"),
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: Optional[str] = None,
    store: CacheStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Filter the first leaderboard by name substring and minimum total point."""
    return _view(store, settings, DataSet.LEADERBOARD, page, limit, sort_by, order, name, min_point)


@router.get("/leaderboard")
async def get_leaderboard(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: Optional[str] = None,
    store: CacheStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Ranked first leaderboard."""
    return _view(store, settings, DataSet.LEADERBOARD, page, limit, sort_by, order)


@router.get("/leaderboard2/search")
async def search_leaderboard2(
    name: Optional[str] = None,
    min_point: Optional[str] = Query(None, alias="minPoint"),
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: Optional[str] = None,
    store: CacheStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Filter the second leaderboard by name substring and minimum total point."""
    return _view(store, settings, DataSet.LEADERBOARD2, page, limit, sort_by, order, name, min_point)


@router.get("/leaderboard2")
async def get_leaderboard2(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: Optional[str] = None,
    store: CacheStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Ranked second leaderboard."""
    return _view(store, settings, DataSet.LEADERBOARD2, page, limit, sort_by, order)
