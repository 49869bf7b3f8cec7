"""
Brand intelligence extraction from a homepage URL.

This module provides the retrieval strategies and the BrandIntelligenceExtractor
that runs them as an ordered fallback list.

Strategies:
    - ServerFetchStrategy: fetch the HTML here, sanitize it, send the text to Claude
    - ModelFetchStrategy: let Claude fetch the page with the web fetch tool;
      one immediate retry of the whole call on failure

Example:
    >>> extractor = BrandIntelligenceExtractor(llm_service, page_fetcher, settings)
    >>> brand = await extractor.extract_via_web_fetch("https://example.com")
    >>> print(brand.business_name)
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_none,
)

from brand_guide.config.settings import Settings, get_settings
from brand_guide.extractors.normalizers import normalize_brand_intelligence
from brand_guide.extractors.prompts import (
    build_extraction_system_prompt,
    format_model_fetch_prompt,
    format_server_fetch_prompt,
)
from brand_guide.models.schemas import BrandIntelligence, ExtractionStrategy
from brand_guide.services.llm_service import ClaudeService, TaskType
from brand_guide.services.page_fetcher import PageFetcher
from brand_guide.utils.errors import (
    ErrorHandler,
    ModelCallError,
    UnparseableOutputError,
)
from brand_guide.utils.json_recovery import extract_first_json_object
from brand_guide.utils.logger import get_logger
from brand_guide.utils.text import sanitize_html

logger = get_logger(__name__)


def parse_brand_intelligence(raw_text: str) -> BrandIntelligence:
    """
    Recover and normalize the BrandIntelligence object from model output.

    Raises:
        UnparseableOutputError: If no JSON object can be recovered.
    """
    raw = extract_first_json_object(raw_text)
    if raw is None:
        raise UnparseableOutputError("Extraction returned invalid JSON.", raw_text)
    return normalize_brand_intelligence(raw)


# =============================================================================
# Retrieval Strategies
# =============================================================================

class RetrievalStrategy(ABC):
    """One way of getting page content in front of the model."""

    kind: ExtractionStrategy

    def __init__(self, llm_service: ClaudeService, settings: Optional[Settings] = None):
        self.llm_service = llm_service
        self.settings = settings or get_settings()

    @abstractmethod
    async def extract(self, url: str) -> BrandIntelligence:
        """Return a normalized BrandIntelligence or raise a BrandGuideError."""


class ServerFetchStrategy(RetrievalStrategy):
    """Fetch and sanitize the page locally, then make one plain model call."""

    kind = ExtractionStrategy.SERVER_FETCH

    def __init__(
        self,
        llm_service: ClaudeService,
        page_fetcher: PageFetcher,
        settings: Optional[Settings] = None,
    ):
        super().__init__(llm_service, settings)
        self.page_fetcher = page_fetcher

    async def extract(self, url: str) -> BrandIntelligence:
        html = await self.page_fetcher.fetch(url)
        visible_text = sanitize_html(html, self.settings.extraction_text_max_length)

        logger.debug(
            "Visible text prepared",
            url=url,
            html_length=len(html),
            visible_text_length=len(visible_text),
        )

        response = await self.llm_service.create_message(
            system=build_extraction_system_prompt(),
            user_message=format_server_fetch_prompt(url, visible_text),
            model=self.settings.extraction_model,
            task_type=TaskType.EXTRACTION,
        )
        return parse_brand_intelligence(response.text)


class ModelFetchStrategy(RetrievalStrategy):
    """
    Let Claude fetch the page itself with the web fetch tool.

    A tool error in the response, unrecoverable JSON, or a raised model-call
    error each fail the attempt; the whole call is retried once with no delay.
    """

    kind = ExtractionStrategy.MODEL_FETCH

    def __init__(
        self,
        llm_service: ClaudeService,
        settings: Optional[Settings] = None,
        max_attempts: int = 2,
    ):
        super().__init__(llm_service, settings)
        self.max_attempts = max_attempts

    async def extract(self, url: str) -> BrandIntelligence:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_none(),
            retry=retry_if_exception(ErrorHandler.is_strategy_failure),
            before_sleep=self._log_retry,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                brand = await self._attempt(url)
        return brand

    async def _attempt(self, url: str) -> BrandIntelligence:
        response = await self.llm_service.create_message_with_web_fetch(
            system=build_extraction_system_prompt(web_fetch=True),
            user_message=format_model_fetch_prompt(url),
            model=self.settings.extraction_model,
            task_type=TaskType.EXTRACTION,
        )
        if response.web_fetch_error:
            raise ModelCallError("web_fetch tool returned an error", details={"url": url})
        return parse_brand_intelligence(response.text)

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "Web fetch extraction attempt failed, retrying",
            attempt=retry_state.attempt_number,
            error=str(error),
        )


# =============================================================================
# Main Extractor Class
# =============================================================================

class BrandIntelligenceExtractor:
    """
    Runs retrieval strategies in order and returns the first success.

    A ConfigurationError is raised before any strategy runs and is never
    treated as a strategy failure. When every strategy fails, the last
    strategy's error is raised.
    """

    def __init__(
        self,
        llm_service: ClaudeService,
        page_fetcher: Optional[PageFetcher] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.llm_service = llm_service
        self.page_fetcher = page_fetcher or PageFetcher(self.settings)

        self.server_fetch = ServerFetchStrategy(llm_service, self.page_fetcher, self.settings)
        self.model_fetch = ModelFetchStrategy(llm_service, self.settings)

    async def extract(
        self,
        url: str,
        strategies: Sequence[RetrievalStrategy],
    ) -> BrandIntelligence:
        """
        Try each strategy in order.

        Args:
            url: Homepage URL.
            strategies: Ordered strategies; the first success wins.

        Returns:
            Normalized BrandIntelligence.

        Raises:
            ConfigurationError: If the API key is missing.
            BrandGuideError: The last strategy's error when all fail.
        """
        if not strategies:
            raise ValueError("At least one retrieval strategy is required")

        self.llm_service.ensure_configured()

        last_error: Optional[Exception] = None
        for strategy in strategies:
            start = time.time()
            try:
                brand = await strategy.extract(url)
            except Exception as e:
                if not ErrorHandler.is_strategy_failure(e):
                    raise
                last_error = e
                logger.warning(
                    "Retrieval strategy failed",
                    url=url,
                    strategy=strategy.kind.value,
                    error_type=ErrorHandler.categorize_error(e),
                    error=str(e),
                )
                continue

            logger.info(
                "Brand intelligence extracted",
                url=url,
                strategy=strategy.kind.value,
                fields=len(brand.to_dict()),
                duration_ms=int((time.time() - start) * 1000),
            )
            return brand

        raise last_error

    async def extract_from_url(self, url: str) -> BrandIntelligence:
        """Server-fetch strategy only."""
        return await self.extract(url, [self.server_fetch])

    async def extract_via_web_fetch(self, url: str) -> BrandIntelligence:
        """Model-fetch strategy, falling back to server fetch."""
        return await self.extract(url, [self.model_fetch, self.server_fetch])

    async def extract_with_fallback(self, url: str) -> BrandIntelligence:
        """Server fetch first, model fetch as the fallback."""
        return await self.extract(url, [self.server_fetch, self.model_fetch])
