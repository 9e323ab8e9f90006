"""
Refresh orchestrator.

Runs every data set's pipeline concurrently, stages each success into the
cache store as a whole-snapshot replace, and isolates failures so one broken
sheet never blocks or corrupts the others. After every cycle the shared
heartbeat timestamp advances, whatever the individual outcomes.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional

from ..cache.store import CacheStore, DataSet
from .pipelines import Pipeline


logger = logging.getLogger(__name__)


@dataclass
class RefreshReport:
    """Outcome of one refresh cycle."""

    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    duration_seconds: float = 0.0
    succeeded: list[DataSet] = field(default_factory=list)
    failed: dict[DataSet, str] = field(default_factory=dict)
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return not self.skipped and not self.failed


class RefreshOrchestrator:
    """Sole writer of the cache store."""

    def __init__(self, store: CacheStore, pipelines: Mapping[DataSet, Pipeline]):
        self.store = store
        self.pipelines = dict(pipelines)
        self._lock = asyncio.Lock()

    @property
    def in_progress(self) -> bool:
        return self._lock.locked()

    async def _run_one(self, data_set: DataSet, pipeline: Pipeline) -> None:
        try:
            values = await pipeline()
        except Exception as e:
            logger.error(f"Refresh of {data_set.value} failed, keeping previous snapshot: {e!r}")
            raise
        self.store.swap(data_set, values)

    async def refresh_all(self) -> RefreshReport:
        """
        Run one refresh cycle.

        A trigger that arrives while a cycle is running returns immediately
        with ``skipped=True``; cycles never overlap.
        """
        if self._lock.locked():
            logger.warning("Refresh already in progress, skipping trigger")
            return RefreshReport(skipped=True)

        async with self._lock:
            report = RefreshReport(started_at=datetime.now(timezone.utc))
            start = time.perf_counter()

            data_sets = list(self.pipelines)
            outcomes = await asyncio.gather(
                *(self._run_one(data_set, self.pipelines[data_set]) for data_set in data_sets),
                return_exceptions=True,
            )
            for data_set, outcome in zip(data_sets, outcomes):
                if isinstance(outcome, BaseException):
                    report.failed[data_set] = f"{type(outcome).__name__}: {outcome}"
                else:
                    report.succeeded.append(data_set)

            report.finished_at = self.store.touch()
            report.duration_seconds = time.perf_counter() - start

        logger.info(
            f"Refresh cycle finished in {report.duration_seconds:.2f}s: "
            f"{len(report.succeeded)} updated, {len(report.failed)} failed"
        )
        return report
