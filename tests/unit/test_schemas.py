import pytest
from pydantic import ValidationError

from brand_guide.models.schemas import (
    BRAND_INTELLIGENCE_FIELDS,
    BRAND_PROFILE_FIELDS,
    BrandIntelligence,
    BrandProfile,
    BrandReport,
    ExtractionStrategy,
    FieldKind,
    validate_url,
)


def test_field_table_matches_model():
    assert len(BRAND_INTELLIGENCE_FIELDS) == 27
    assert list(BRAND_INTELLIGENCE_FIELDS) == list(BrandIntelligence.model_fields)


def test_field_kinds():
    booleans = [k for k, v in BRAND_INTELLIGENCE_FIELDS.items() if v is FieldKind.BOOLEAN]
    assert booleans == ["handles_insurance_claims", "offers_drone_inspections", "offers_financing"]
    assert BRAND_INTELLIGENCE_FIELDS["logo_url"] is FieldKind.URL
    assert BRAND_INTELLIGENCE_FIELDS["year_founded"] is FieldKind.YEAR


def test_profile_fields_match_model():
    assert len(BRAND_PROFILE_FIELDS) == 17
    assert list(BRAND_PROFILE_FIELDS) == list(BrandProfile.model_fields)


def test_brand_intelligence_excludes_absent_fields(sample_brand_intelligence):
    data = sample_brand_intelligence.to_dict()

    assert data["business_name"] == "Acme Roofing"
    assert data["offers_drone_inspections"] is False
    assert "offers_financing" not in data
    assert "origin_story" not in data


def test_brand_intelligence_json_round_trip(sample_brand_intelligence):
    restored = BrandIntelligence.from_json(sample_brand_intelligence.to_json())
    assert restored == sample_brand_intelligence


def test_brand_profile_requires_all_fields():
    with pytest.raises(ValidationError):
        BrandProfile(company_name="Acme")


def test_brand_report_succeeded(sample_profile):
    assert BrandReport(url="https://acme.example", markdown="# Guide").succeeded
    assert BrandReport(url="https://acme.example", profile=sample_profile).succeeded
    failed = BrandReport(url="https://acme.example", errors={"guide": "x", "profile": "y"})
    assert not failed.succeeded


def test_extraction_strategy_values():
    assert ExtractionStrategy.SERVER_FETCH.value == "server_fetch"
    assert ExtractionStrategy.MODEL_FETCH.value == "model_fetch"


# =============================================================================
# URL validation
# =============================================================================

@pytest.mark.parametrize("url", ["https://acme.example", "http://acme.example/path", "  https://acme.example  "])
def test_valid_urls(url):
    assert validate_url(url) == url.strip()


@pytest.mark.parametrize("url", ["", "   ", "acme.example", "ftp://acme.example", None, 42])
def test_invalid_urls(url):
    with pytest.raises(ValueError):
        validate_url(url)
