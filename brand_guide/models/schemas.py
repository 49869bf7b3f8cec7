"""
Pydantic models and schemas for the Brand Guide Pipeline.

This module defines the data structures passed between pipeline stages.

Models:
    - BrandIntelligence: normalized extraction result (all fields optional)
    - BrandProfile: flat 17-field profile (all fields required)
    - BrandReport: combined guide + profile outcome for one URL
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Self, Union

from pydantic import (
    BaseModel as PydanticBaseModel,
    ConfigDict,
    Field,
)


NOT_PROVIDED = "Not Provided"


# =============================================================================
# Base Configuration
# =============================================================================

class BaseModel(PydanticBaseModel):
    """Base model with common configuration for all schemas."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_json(self, **kwargs) -> str:
        """Serialize model to JSON string."""
        return self.model_dump_json(indent=2, **kwargs)

    def to_dict(self, **kwargs) -> dict[str, Any]:
        """Serialize model to dictionary."""
        return self.model_dump(**kwargs)

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        """Deserialize model from JSON string."""
        return cls.model_validate_json(json_str)


# =============================================================================
# Enums
# =============================================================================

class ExtractionStrategy(str, Enum):
    """How page content reaches the model."""
    SERVER_FETCH = "server_fetch"
    MODEL_FETCH = "model_fetch"


class FieldKind(str, Enum):
    """Coercion rule applied to a BrandIntelligence field during normalization."""
    TEXT = "text"
    TEXT_OR_LIST = "text_or_list"
    BOOLEAN = "boolean"
    YEAR = "year"
    URL = "url"


# =============================================================================
# Validators (Reusable)
# =============================================================================

def validate_url(url: Any) -> str:
    """Validate a homepage URL: non-empty string starting with http:// or https://."""
    if not isinstance(url, str) or not url.strip():
        raise ValueError("Invalid request: url must be a non-empty string")
    trimmed = url.strip()
    if not trimmed.startswith(("http://", "https://")):
        raise ValueError(
            "Invalid request: url must be a non-empty string starting with http:// or https://"
        )
    return trimmed


# =============================================================================
# Brand Intelligence
# =============================================================================

# Field order here is the order used in prompts and in the guide inputs block.
BRAND_INTELLIGENCE_FIELDS: dict[str, FieldKind] = {
    "business_name": FieldKind.TEXT,
    "logo_url": FieldKind.URL,
    "origin_story": FieldKind.TEXT,
    "business_goals": FieldKind.TEXT_OR_LIST,
    "slogan_or_tagline": FieldKind.TEXT,
    "unique_differentiators": FieldKind.TEXT_OR_LIST,
    "primary_customer_result": FieldKind.TEXT,
    "ideal_customer_review_example": FieldKind.TEXT,
    "accreditations_and_awards": FieldKind.TEXT_OR_LIST,
    "core_values": FieldKind.TEXT_OR_LIST,
    "desired_emotional_response": FieldKind.TEXT,
    "brand_voice_description": FieldKind.TEXT,
    "brand_tone": FieldKind.TEXT,
    "brand_should_not_sound_like": FieldKind.TEXT,
    "desired_brand_perception": FieldKind.TEXT,
    "buyer_persona": FieldKind.TEXT,
    "local_area_name": FieldKind.TEXT,
    "five_step_process": FieldKind.TEXT_OR_LIST,
    "weather_events_causing_service_needs": FieldKind.TEXT_OR_LIST,
    "handles_insurance_claims": FieldKind.BOOLEAN,
    "offers_drone_inspections": FieldKind.BOOLEAN,
    "year_founded": FieldKind.YEAR,
    "preferred_call_to_action": FieldKind.TEXT,
    "offers_financing": FieldKind.BOOLEAN,
    "financing_callouts": FieldKind.TEXT_OR_LIST,
    "financing_disclaimers": FieldKind.TEXT_OR_LIST,
    "reference_example_content": FieldKind.TEXT,
}

# Non-empty arrays are kept as returned, for any non-boolean field
TextOrList = Union[str, list[Any]]


class BrandIntelligence(BaseModel):
    """
    Canonical brand extraction result.

    Every field is optional; an absent field is None on the model and missing
    from to_dict() output. Tri-state booleans use None for "unknown".
    """

    model_config = ConfigDict(extra="ignore")

    business_name: Optional[TextOrList] = None
    logo_url: Optional[TextOrList] = None
    origin_story: Optional[TextOrList] = None
    business_goals: Optional[TextOrList] = None
    slogan_or_tagline: Optional[TextOrList] = None
    unique_differentiators: Optional[TextOrList] = None
    primary_customer_result: Optional[TextOrList] = None
    ideal_customer_review_example: Optional[TextOrList] = None
    accreditations_and_awards: Optional[TextOrList] = None
    core_values: Optional[TextOrList] = None
    desired_emotional_response: Optional[TextOrList] = None
    brand_voice_description: Optional[TextOrList] = None
    brand_tone: Optional[TextOrList] = None
    brand_should_not_sound_like: Optional[TextOrList] = None
    desired_brand_perception: Optional[TextOrList] = None
    buyer_persona: Optional[TextOrList] = None
    local_area_name: Optional[TextOrList] = None
    five_step_process: Optional[TextOrList] = None
    weather_events_causing_service_needs: Optional[TextOrList] = None
    handles_insurance_claims: Optional[bool] = None
    offers_drone_inspections: Optional[bool] = None
    year_founded: Optional[Union[int, float, str, list[Any]]] = None
    preferred_call_to_action: Optional[TextOrList] = None
    offers_financing: Optional[bool] = None
    financing_callouts: Optional[TextOrList] = None
    financing_disclaimers: Optional[TextOrList] = None
    reference_example_content: Optional[TextOrList] = None

    def to_dict(self, **kwargs) -> dict[str, Any]:
        """Serialize present fields only."""
        kwargs.setdefault("exclude_none", True)
        return self.model_dump(**kwargs)

    def to_json(self, **kwargs) -> str:
        kwargs.setdefault("exclude_none", True)
        return self.model_dump_json(indent=2, **kwargs)


# =============================================================================
# Brand Profile
# =============================================================================

BRAND_PROFILE_FIELDS: tuple[str, ...] = (
    "company_name",
    "type_of_business",
    "website",
    "company_email",
    "company_address",
    "phone_number",
    "business_hours",
    "tone_of_voice",
    "target_audience",
    "customer_pain_points",
    "brand_promise",
    "brand_values",
    "what_does_your_brand_do",
    "what_makes_you_better_than_competitors",
    "unique_selling_proposition",
    "risks_of_inaction",
    "call_to_action",
)


class BrandProfile(BaseModel):
    """Flat brand profile; every field is always present."""

    company_name: str
    type_of_business: str
    website: str
    company_email: str
    company_address: str
    phone_number: str
    business_hours: str
    tone_of_voice: str
    target_audience: str
    customer_pain_points: str
    brand_promise: str
    brand_values: str
    what_does_your_brand_do: str
    what_makes_you_better_than_competitors: str
    unique_selling_proposition: str
    risks_of_inaction: str
    call_to_action: str


# =============================================================================
# Report Models
# =============================================================================

class BrandReport(BaseModel):
    """Outcome of running the guide and profile flows for one URL."""

    url: str
    markdown: Optional[str] = None
    profile: Optional[BrandProfile] = None
    errors: Optional[dict[str, str]] = Field(
        default=None,
        description="Failure message per half ('guide', 'profile'); None when both succeeded",
    )

    @property
    def succeeded(self) -> bool:
        return self.markdown is not None or self.profile is not None
