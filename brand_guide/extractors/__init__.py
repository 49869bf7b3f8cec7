"""
Extractors module for the Brand Guide Pipeline.

Components:
    - BrandIntelligenceExtractor: runs retrieval strategies as a fallback list
    - ServerFetchStrategy / ModelFetchStrategy: the two retrieval strategies
    - normalizers: raw model payload -> BrandIntelligence / BrandProfile
    - prompts: extraction prompt templates
"""

from brand_guide.extractors.brand_extractor import (
    # Main class
    BrandIntelligenceExtractor,
    # Strategies
    RetrievalStrategy,
    ServerFetchStrategy,
    ModelFetchStrategy,
    # Helpers
    parse_brand_intelligence,
)
from brand_guide.extractors.normalizers import (
    normalize_boolean,
    normalize_brand_intelligence,
    normalize_brand_profile,
)
from brand_guide.extractors.prompts import (
    build_extraction_system_prompt,
    format_server_fetch_prompt,
    format_model_fetch_prompt,
)

__all__ = [
    # Main class
    "BrandIntelligenceExtractor",
    # Strategies
    "RetrievalStrategy",
    "ServerFetchStrategy",
    "ModelFetchStrategy",
    "parse_brand_intelligence",
    # Normalizers
    "normalize_boolean",
    "normalize_brand_intelligence",
    "normalize_brand_profile",
    # Prompts module
    "build_extraction_system_prompt",
    "format_server_fetch_prompt",
    "format_model_fetch_prompt",
]
