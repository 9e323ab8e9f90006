"""Health check endpoints."""

from fastapi import APIRouter, Depends

from ...cache.store import CacheStore
from ..deps import format_timestamp, get_store


router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(store: CacheStore = Depends(get_store)):
    """Liveness plus the time of the last completed refresh cycle."""
    return {"status": "ok", "lastSync": format_timestamp(store.last_sync)}


@router.get("/data")
async def data_counts(store: CacheStore = Depends(get_store)):
    """Records held per data set (0 means never loaded)."""
    return {"lastSync": format_timestamp(store.last_sync), "counts": store.counts()}
