"""Request dependencies and response helpers shared by the routers."""

from datetime import datetime
from typing import Any, Iterable, Optional

from fastapi import Request
from pydantic import BaseModel

from ..cache.store import CacheStore
from ..config.settings import Settings
from ..schemas.page import Page


def get_store(request: Request) -> CacheStore:
    """Cache store owned by the app's refresh orchestrator."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def dump(models: Iterable[BaseModel]) -> list[dict[str, Any]]:
    """Serialize models with their camelCase wire names."""
    return [m.model_dump(by_alias=True, mode="json") for m in models]


def page_envelope(page: Page) -> dict[str, Any]:
    """Standard ``{success, data, meta}`` body for a page."""
    return {
        "success": True,
        "data": dump(page.items),
        "meta": page.meta.model_dump(by_alias=True),
    }


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
