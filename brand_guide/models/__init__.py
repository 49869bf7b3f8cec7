"""Data models module for the Brand Guide Pipeline."""

from brand_guide.models.schemas import (
    # Base Models
    BaseModel,

    # Enums
    ExtractionStrategy,
    FieldKind,

    # Field Tables
    BRAND_INTELLIGENCE_FIELDS,
    BRAND_PROFILE_FIELDS,
    NOT_PROVIDED,

    # Brand Models
    BrandIntelligence,
    BrandProfile,

    # Report Models
    BrandReport,

    # Validators
    validate_url,
)

__all__ = [
    # Base Models
    "BaseModel",

    # Enums
    "ExtractionStrategy",
    "FieldKind",

    # Field Tables
    "BRAND_INTELLIGENCE_FIELDS",
    "BRAND_PROFILE_FIELDS",
    "NOT_PROVIDED",

    # Brand Models
    "BrandIntelligence",
    "BrandProfile",

    # Report Models
    "BrandReport",

    # Validators
    "validate_url",
]
