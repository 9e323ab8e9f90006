"""Sheet fetching and the refresh cycle."""

from .client import SheetClient
from .orchestrator import RefreshOrchestrator, RefreshReport
from .pipelines import Pipeline, build_pipelines
from .scheduler import Ticker

__all__ = [
    "Pipeline",
    "RefreshOrchestrator",
    "RefreshReport",
    "SheetClient",
    "Ticker",
    "build_pipelines",
]
