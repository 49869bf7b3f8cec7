"""
Pipeline orchestrator for the combined brand report.

Runs the guide flow (extract intelligence, then write the Markdown guide) and
the profile flow (web-fetch brand profile) concurrently for one URL. Each
half succeeds or fails on its own; a failed half is recorded in the report's
errors instead of being raised.

Example:
    >>> async with BrandGuidePipeline(settings) as pipeline:
    ...     report = await pipeline.run("https://example.com")
    ...     print(report.markdown)
"""

import asyncio
import time
from typing import Optional
from uuid import uuid4

from brand_guide.config.settings import Settings, get_settings
from brand_guide.extractors.brand_extractor import BrandIntelligenceExtractor
from brand_guide.generators.guide_generator import BrandGuideGenerator
from brand_guide.generators.profile_generator import BrandProfileGenerator
from brand_guide.models.schemas import BrandIntelligence, BrandProfile, BrandReport
from brand_guide.services.llm_service import ClaudeService
from brand_guide.services.page_fetcher import PageFetcher
from brand_guide.utils.errors import ErrorHandler
from brand_guide.utils.logger import LogContext, get_logger

logger = get_logger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Extraction orders selectable from the CLI
STRATEGY_SERVER = "server"
STRATEGY_WEB_FETCH = "web-fetch"
STRATEGY_AUTO = "auto"
STRATEGY_CHOICES = (STRATEGY_SERVER, STRATEGY_WEB_FETCH, STRATEGY_AUTO)


# =============================================================================
# Main Pipeline Class
# =============================================================================

class BrandGuidePipeline:
    """
    Owns the services for one or more runs and wires the components together.

    Services may be injected (tests do this); anything not injected is created
    on entry and closed on exit.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        llm_service: Optional[ClaudeService] = None,
        page_fetcher: Optional[PageFetcher] = None,
    ):
        self.settings = settings or get_settings()
        self._llm_service = llm_service
        self._page_fetcher = page_fetcher
        self._owned: list = []

        self._extractor: Optional[BrandIntelligenceExtractor] = None
        self._guide_generator: Optional[BrandGuideGenerator] = None
        self._profile_generator: Optional[BrandProfileGenerator] = None

    async def __aenter__(self) -> "BrandGuidePipeline":
        await self._initialize_services()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _initialize_services(self) -> None:
        if self._llm_service is None:
            self._llm_service = ClaudeService(self.settings)
            self._owned.append(self._llm_service)
        if self._page_fetcher is None:
            self._page_fetcher = PageFetcher(self.settings)
            await self._page_fetcher.connect()
            self._owned.append(self._page_fetcher)

        self._extractor = BrandIntelligenceExtractor(
            llm_service=self._llm_service,
            page_fetcher=self._page_fetcher,
            settings=self.settings,
        )
        self._guide_generator = BrandGuideGenerator(self._llm_service, self.settings)
        self._profile_generator = BrandProfileGenerator(self._llm_service, self.settings)

    @property
    def extractor(self) -> BrandIntelligenceExtractor:
        if self._extractor is None:
            raise RuntimeError("Pipeline not initialized. Use async context manager.")
        return self._extractor

    @property
    def guide_generator(self) -> BrandGuideGenerator:
        if self._guide_generator is None:
            raise RuntimeError("Pipeline not initialized. Use async context manager.")
        return self._guide_generator

    @property
    def profile_generator(self) -> BrandProfileGenerator:
        if self._profile_generator is None:
            raise RuntimeError("Pipeline not initialized. Use async context manager.")
        return self._profile_generator

    # =========================================================================
    # Flows
    # =========================================================================

    async def extract(self, url: str, strategy: str = STRATEGY_AUTO) -> BrandIntelligence:
        """Extract brand intelligence using a named strategy order."""
        if strategy == STRATEGY_SERVER:
            return await self.extractor.extract_from_url(url)
        if strategy == STRATEGY_WEB_FETCH:
            return await self.extractor.extract_via_web_fetch(url)
        if strategy == STRATEGY_AUTO:
            return await self.extractor.extract_with_fallback(url)
        raise ValueError(f"Unknown extraction strategy: {strategy}")

    async def run_guide_flow(self, url: str, strategy: str = STRATEGY_AUTO) -> str:
        """Extract intelligence, then generate the Markdown guide."""
        brand = await self.extract(url, strategy)
        return await self.guide_generator.generate_markdown(brand)

    async def run_profile_flow(self, url: str) -> BrandProfile:
        return await self.profile_generator.generate(url)

    async def run(self, url: str) -> BrandReport:
        """
        Run the guide and profile flows concurrently.

        Args:
            url: Homepage URL.

        Returns:
            BrandReport with whichever halves succeeded and an error message
            per failed half.
        """
        request_id = uuid4().hex[:12]
        start = time.time()

        with LogContext(request_id=request_id, url=url):
            logger.info("Starting brand report")
            guide_result, profile_result = await asyncio.gather(
                self.run_guide_flow(url),
                self.run_profile_flow(url),
                return_exceptions=True,
            )

            errors: dict[str, str] = {}
            markdown = self._unwrap("guide", guide_result, errors)
            profile = self._unwrap("profile", profile_result, errors)

            logger.info(
                "Brand report completed",
                guide_ok="guide" not in errors,
                profile_ok="profile" not in errors,
                duration_ms=int((time.time() - start) * 1000),
            )

        return BrandReport(
            url=url,
            markdown=markdown,
            profile=profile,
            errors=errors or None,
        )

    @staticmethod
    def _unwrap(half: str, result, errors: dict[str, str]):
        if isinstance(result, Exception):
            logger.warning(
                "Report half failed",
                half=half,
                error_type=ErrorHandler.categorize_error(result),
                error=str(result),
            )
            errors[half] = str(result)
            return None
        if isinstance(result, BaseException):
            raise result
        return result

    # =========================================================================
    # Cleanup
    # =========================================================================

    async def close(self) -> None:
        """Close the services this pipeline created."""
        while self._owned:
            service = self._owned.pop()
            await service.close()


# =============================================================================
# Convenience Functions
# =============================================================================

async def generate_brand_report(url: str, settings: Optional[Settings] = None) -> BrandReport:
    """
    Convenience function to build the combined report for one URL.

    Example:
        >>> report = await generate_brand_report("https://example.com")
        >>> print(report.errors)
    """
    async with BrandGuidePipeline(settings=settings) as pipeline:
        return await pipeline.run(url)
