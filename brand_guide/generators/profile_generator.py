"""
Brand profile generation: one web-fetch model call, no fallback.
"""

from typing import Optional

from brand_guide.config.settings import Settings, get_settings
from brand_guide.extractors.normalizers import normalize_brand_profile
from brand_guide.generators.prompts import (
    build_profile_system_prompt,
    format_profile_prompt,
)
from brand_guide.models.schemas import BrandProfile
from brand_guide.services.llm_service import ClaudeService, TaskType
from brand_guide.utils.errors import UnparseableOutputError
from brand_guide.utils.json_recovery import extract_first_json_object
from brand_guide.utils.logger import get_logger

logger = get_logger(__name__)


class BrandProfileGenerator:
    """Builds a BrandProfile by letting Claude fetch the page itself."""

    def __init__(self, llm_service: ClaudeService, settings: Optional[Settings] = None):
        self.llm_service = llm_service
        self.settings = settings or get_settings()

    async def generate(self, url: str) -> BrandProfile:
        """
        Fetch the URL through the web fetch tool and return the profile.

        Raises:
            ConfigurationError: If the API key is missing.
            ModelCallError: If the model call fails or times out.
            UnparseableOutputError: If the response has no JSON object.
        """
        self.llm_service.ensure_configured()

        response = await self.llm_service.create_message_with_web_fetch(
            system=build_profile_system_prompt(),
            user_message=format_profile_prompt(url),
            model=self.settings.extraction_model,
            task_type=TaskType.PROFILE,
        )
        if response.web_fetch_error:
            logger.warning("web_fetch tool reported an error during profile generation", url=url)

        raw = extract_first_json_object(response.text)
        if raw is None:
            raise UnparseableOutputError("Brand profile extraction returned invalid JSON.", response.text)

        profile = normalize_brand_profile(raw)
        logger.info("Brand profile generated", url=url, company_name=profile.company_name)
        return profile
