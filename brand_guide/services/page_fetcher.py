"""
HTTP page fetcher for server-side retrieval.

Fetches the raw HTML of a homepage with a descriptive user agent, following
redirects. JavaScript is not executed.

Example:
    >>> async with PageFetcher(settings) as fetcher:
    ...     html = await fetcher.fetch("https://example.com")
"""

from __future__ import annotations

import time
from typing import Optional

import httpx

from brand_guide.config.settings import Settings, get_settings
from brand_guide.utils.errors import PageFetchError
from brand_guide.utils.logger import get_logger

logger = get_logger(__name__)


USER_AGENT = "BrandIntelligenceExtractor/1.0 (extraction; no indexing)"


class PageFetcher:
    """
    Async HTML fetcher built on httpx.

    A client may be injected (tests use httpx.MockTransport); otherwise one is
    created lazily and closed by close() / the async context manager.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self._client = client
        self._owns_client = client is None

    async def connect(self) -> None:
        """Initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.page_fetch_timeout_seconds),
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
            )

    async def close(self) -> None:
        """Close HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "PageFetcher":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch(self, url: str) -> str:
        """
        Fetch a page and return its body text.

        Raises:
            PageFetchError: On network failure or a non-2xx status.
        """
        if self._client is None:
            await self.connect()

        start_time = time.time()
        try:
            response = await self._client.get(
                url,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Page fetch returned error status", url=url, status_code=status)
            raise PageFetchError(
                f"Failed to fetch URL: {status} {e.response.reason_phrase}",
                url=url,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Page fetch failed", url=url, error=str(e))
            raise PageFetchError(f"Failed to fetch URL: {e}", url=url) from e

        logger.info(
            "Page fetched",
            url=url,
            status_code=response.status_code,
            html_length=len(response.text),
            duration_ms=int((time.time() - start_time) * 1000),
        )
        return response.text
