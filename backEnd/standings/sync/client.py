"""Async client for published sheet CSV exports, with timeout and retry."""

import logging
from typing import Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..errors import FetchFailure


logger = logging.getLogger(__name__)


class RetryableStatus(Exception):
    """Upstream answered with a status worth retrying (429 or 5xx)."""

    def __init__(self, status_code: int):
        super().__init__(f"Upstream returned HTTP {status_code}")
        self.status_code = status_code


class SheetClient:
    """Downloads sheet exports as text."""

    def __init__(
        self,
        timeout: float = 10.0,
        max_attempts: int = 3,
        backoff_min: float = 1.0,
        backoff_max: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.backoff_min = backoff_min
        self.backoff_max = backoff_max
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy initialization of HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                # Published sheets redirect to a googleusercontent host
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SheetClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_once(self, url: str) -> str:
        response = await self.client.get(url)
        if response.status_code == 429 or response.status_code >= 500:
            raise RetryableStatus(response.status_code)
        if response.status_code >= 400:
            raise FetchFailure(
                f"Sheet request failed with HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )
        return response.text

    async def fetch_text(self, url: str) -> str:
        """
        Download a sheet export.

        Transport errors, timeouts, 429 and 5xx responses are retried with
        exponential backoff up to ``max_attempts`` tries in total.

        Raises:
            FetchFailure: When the download ultimately fails
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=self.backoff_min, max=self.backoff_max),
            retry=retry_if_exception_type((httpx.TransportError, RetryableStatus)),
            before_sleep=lambda retry_state: logger.warning(
                f"Retrying sheet fetch after {retry_state.outcome.exception()}"
            ),
        )
        try:
            async for attempt in retrying:
                with attempt:
                    return await self._get_once(url)
        except RetryError as e:
            last = e.last_attempt.exception()
            raise FetchFailure(
                f"Sheet fetch failed after {self.max_attempts} attempts: {last}",
                url=url,
                status_code=getattr(last, "status_code", None),
            ) from last
