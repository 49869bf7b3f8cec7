"""
Markdown brand guide generation from normalized BrandIntelligence.

The guide is written by Claude from a labeled inputs block; the model is told
to use only those inputs, so every field is listed, missing ones explicitly.

Example:
    >>> generator = BrandGuideGenerator(llm_service, settings)
    >>> markdown = await generator.generate_markdown(brand)
"""

from typing import Any, Optional

from brand_guide.config.settings import Settings, get_settings
from brand_guide.generators.prompts import (
    FIELD_LABELS,
    build_guide_system_prompt,
    format_guide_prompt,
)
from brand_guide.models.schemas import (
    BRAND_INTELLIGENCE_FIELDS,
    NOT_PROVIDED,
    BrandIntelligence,
)
from brand_guide.services.llm_service import ClaudeService, TaskType
from brand_guide.utils.logger import get_logger

logger = get_logger(__name__)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() in ("", NOT_PROVIDED)
    if isinstance(value, list):
        return len(value) == 0
    return False


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, str):
        return value.strip()
    return str(value)


def format_brand_intelligence_for_prompt(brand: BrandIntelligence) -> str:
    """
    Render BrandIntelligence as the labeled inputs block of the guide prompt.

    One line per field in schema order. Missing, empty and "Not Provided"
    values render as "Not Provided"; booleans as Yes/No; lists as a label line
    followed by "  - item" lines.
    """
    lines: list[str] = []
    for key in BRAND_INTELLIGENCE_FIELDS:
        label = FIELD_LABELS[key]
        value = getattr(brand, key)

        if _is_missing(value):
            lines.append(f"{label}: {NOT_PROVIDED}")
        elif isinstance(value, list):
            lines.append(f"{label}:")
            lines.extend(f"  - {item}" for item in value)
        else:
            lines.append(f"{label}: {_format_scalar(value)}")
    return "\n".join(lines)


class BrandGuideGenerator:
    """Generates the Markdown brand guide with the guide model."""

    def __init__(self, llm_service: ClaudeService, settings: Optional[Settings] = None):
        self.llm_service = llm_service
        self.settings = settings or get_settings()

    async def generate_markdown(self, brand: BrandIntelligence) -> str:
        """
        Generate the brand guide.

        Args:
            brand: Normalized brand intelligence.

        Returns:
            The guide as trimmed Markdown.

        Raises:
            ConfigurationError: If the API key is missing.
            ModelCallError: If the model call fails or times out.
        """
        self.llm_service.ensure_configured()

        inputs_block = format_brand_intelligence_for_prompt(brand)
        response = await self.llm_service.create_message(
            system=build_guide_system_prompt(),
            user_message=format_guide_prompt(inputs_block),
            model=self.settings.brand_guide_model,
            task_type=TaskType.BRAND_GUIDE,
        )

        markdown = response.text.strip()
        logger.info(
            "Brand guide generated",
            business_name=brand.business_name,
            markdown_length=len(markdown),
        )
        return markdown
