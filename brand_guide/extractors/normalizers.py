"""
Normalization of raw model payloads into the pipeline's schemas.

Both normalizers accept an arbitrary decoded object and never raise on
unexpected shapes: unknown keys, nested objects and nulls are dropped, and
empty values follow each schema's defaulting policy.
"""

from typing import Any, Optional

from brand_guide.models.schemas import (
    BRAND_INTELLIGENCE_FIELDS,
    BRAND_PROFILE_FIELDS,
    NOT_PROVIDED,
    BrandIntelligence,
    BrandProfile,
    FieldKind,
)

_TRUE_VALUES = {"yes", "true", "1"}
_FALSE_VALUES = {"no", "false", "0"}


def normalize_boolean(value: Any) -> Optional[bool]:
    """Map "Yes"/"No"-style values to a bool; anything unrecognized is unknown (None)."""
    if isinstance(value, bool):
        return value
    if value is None or isinstance(value, (dict, list)):
        return None
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return str(value)


def _normalize_text(kind: FieldKind, value: str) -> Optional[str]:
    trimmed = value.strip()
    if trimmed:
        return trimmed
    return None if kind is FieldKind.URL else NOT_PROVIDED


def _normalize_field(kind: FieldKind, value: Any) -> Any:
    """Apply one field's coercion rule. None means the key is omitted."""
    if kind is FieldKind.BOOLEAN:
        return normalize_boolean(value)

    if value is None or isinstance(value, dict):
        return None

    if isinstance(value, list):
        # kept as returned, items included
        return value or None

    if isinstance(value, str):
        return _normalize_text(kind, value)

    if kind is FieldKind.YEAR:
        # bool is an int subclass but never a year
        return None if isinstance(value, bool) else value

    return _as_text(value)


def normalize_brand_intelligence(raw: dict[str, Any]) -> BrandIntelligence:
    """
    Normalize a raw extraction payload into BrandIntelligence.

    Rules per field kind:
        - BOOLEAN: yes/true/1 -> True, no/false/0 -> False, else omitted
        - lists: kept as-is when non-empty, omitted when empty
        - strings: trimmed; empty -> "Not Provided" (logo_url: omitted)
        - year_founded: numbers pass through unchanged
        - other scalars pass through (as text for text fields)

    Keys outside the schema and nested objects are dropped.
    """
    normalized: dict[str, Any] = {}
    for key, kind in BRAND_INTELLIGENCE_FIELDS.items():
        if key not in raw:
            continue
        value = _normalize_field(kind, raw[key])
        if value is not None:
            normalized[key] = value
    return BrandIntelligence.model_validate(normalized)


def normalize_brand_profile(raw: dict[str, Any]) -> BrandProfile:
    """Force every profile key into the output; missing, non-string or blank -> "Not Provided"."""
    profile: dict[str, str] = {}
    for key in BRAND_PROFILE_FIELDS:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            profile[key] = value.strip()
        else:
            profile[key] = NOT_PROVIDED
    return BrandProfile.model_validate(profile)
