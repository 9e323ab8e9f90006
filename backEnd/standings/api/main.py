"""
FastAPI application for the standings service.

Provides read-only endpoints for:
- Players
- Leaderboards (ranked, filtered, paginated)
- Lobby assignments per tournament day
- Health checks

The first refresh cycle runs during startup, before any request is served;
a background ticker then refreshes on a fixed interval.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..cache.store import CacheStore
from ..config.settings import Settings, get_settings
from ..observability.logging import configure_logging
from ..sync.client import SheetClient
from ..sync.orchestrator import RefreshOrchestrator
from ..sync.pipelines import build_pipelines
from ..sync.scheduler import Ticker
from .routes import health_router, leaderboard_router, lobbies_router, players_router


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[SheetClient] = None,
    store: Optional[CacheStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    store = store or CacheStore()
    client = client or SheetClient(
        timeout=settings.fetch_timeout_seconds,
        max_attempts=settings.fetch_max_attempts,
    )
    orchestrator = RefreshOrchestrator(store, build_pipelines(client, settings))
    ticker = Ticker(orchestrator.refresh_all, settings.refresh_interval_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup: serve even if every sheet failed (empty snapshots)
        report = await orchestrator.refresh_all()
        if report.failed:
            logger.warning(f"Initial refresh incomplete: {sorted(d.value for d in report.failed)}")
        ticker.start()
        yield
        # Shutdown
        await ticker.stop()
        await client.close()

    app = FastAPI(
        title="Tournament Standings API",
        description="Read-only mirror of the tournament sheets",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.orchestrator = orchestrator
    app.state.ticker = ticker

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(players_router)
    app.include_router(leaderboard_router)
    app.include_router(lobbies_router)

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "standings.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
