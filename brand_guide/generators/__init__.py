"""
Generators module for brand guide Markdown and brand profiles.
"""

from brand_guide.generators.guide_generator import (
    BrandGuideGenerator,
    format_brand_intelligence_for_prompt,
)
from brand_guide.generators.profile_generator import BrandProfileGenerator

__all__ = [
    "BrandGuideGenerator",
    "BrandProfileGenerator",
    "format_brand_intelligence_for_prompt",
]
