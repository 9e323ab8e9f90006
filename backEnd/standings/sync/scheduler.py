"""Fixed-interval ticker driving periodic refresh."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional


logger = logging.getLogger(__name__)


class Ticker:
    """
    Runs an async callback every ``interval`` seconds in a background task.

    The callback is awaited before the next sleep starts, so runs never
    overlap. Exceptions from the callback are logged and the ticker keeps
    going.
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable[object]],
        interval: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        name: str = "refresh-ticker",
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.callback = callback
        self.interval = interval
        self._sleep = sleep
        self._name = name
        self._task: Optional[asyncio.Task] = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _loop(self) -> None:
        while True:
            await self._sleep(self.interval)
            try:
                await self.callback()
            except Exception as e:
                logger.error(f"Scheduled run failed: {e!r}")
            self.ticks += 1

    def start(self) -> None:
        """Start ticking on the running event loop (idempotent)."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._loop(), name=self._name)
        logger.info(f"Ticker started (every {self.interval:g}s)")

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Ticker stopped")
