import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from brand_guide.config.settings import Settings
from brand_guide.models.schemas import BrandIntelligence, BrandProfile, BRAND_PROFILE_FIELDS
from brand_guide.services.llm_service import ClaudeService, ModelResponse, TokenUsage
from brand_guide.services.page_fetcher import PageFetcher


def make_settings(**overrides) -> Settings:
    """Real Settings isolated from .env files; explicit values beat the environment."""
    values = {
        "ANTHROPIC_API_KEY": "sk-ant-test-key",
        "ANTHROPIC_EXTRACTION_MODEL": "claude-sonnet-4-20250514",
        "ANTHROPIC_BRANDGUIDE_MODEL": "claude-sonnet-4-20250514",
        "ANTHROPIC_WEB_FETCH_TIMEOUT_MS": "120000",
        "EXTRACTION_TEXT_MAX_LENGTH": "80000",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def model_response(text: str, web_fetch_error: bool = False) -> ModelResponse:
    return ModelResponse(text=text, usage=TokenUsage(), web_fetch_error=web_fetch_error)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def response_factory():
    return model_response


@pytest.fixture
def mock_settings():
    """Settings with a configured API key."""
    return make_settings()


@pytest.fixture
def no_key_settings():
    """Settings with no API key configured."""
    return make_settings(ANTHROPIC_API_KEY="")


@pytest.fixture
def mock_llm_service(mock_settings):
    """Mock ClaudeService; tests set return values on the two call methods."""
    service = MagicMock(spec=ClaudeService)
    service.settings = mock_settings
    service.ensure_configured = MagicMock()
    service.create_message = AsyncMock()
    service.create_message_with_web_fetch = AsyncMock()
    return service


@pytest.fixture
def mock_page_fetcher():
    fetcher = MagicMock(spec=PageFetcher)
    fetcher.fetch = AsyncMock()
    return fetcher


@pytest.fixture
def sample_html():
    return (
        "<html><head><title>Acme</title><style>body { color: red; }</style>"
        "<script>evil()</script></head><body>"
        "<header><img src=\"/logo.svg\" alt=\"Acme logo\"></header>"
        "<h1>Acme Roofing</h1><p>Family owned since 1998 &amp; proud.</p>"
        "<ul><li>Free inspections</li><li>Storm damage repair</li></ul>"
        "</body></html>"
    )


@pytest.fixture
def sample_brand_payload():
    return {
        "business_name": "Acme Roofing",
        "logo_url": "https://acme.example/logo.svg",
        "slogan_or_tagline": "Roofs that last",
        "core_values": ["Integrity", "Craftsmanship"],
        "handles_insurance_claims": "Yes",
        "offers_drone_inspections": "No",
        "offers_financing": "Not Provided",
        "year_founded": 1998,
    }


@pytest.fixture
def sample_brand_json(sample_brand_payload):
    return json.dumps(sample_brand_payload)


@pytest.fixture
def sample_brand_intelligence():
    return BrandIntelligence(
        business_name="Acme Roofing",
        logo_url="https://acme.example/logo.svg",
        slogan_or_tagline="Roofs that last",
        core_values=["Integrity", "Craftsmanship"],
        handles_insurance_claims=True,
        offers_drone_inspections=False,
        year_founded=1998,
    )


@pytest.fixture
def sample_profile_payload():
    return {
        "company_name": "Acme Roofing",
        "type_of_business": "Roofing contractor",
        "website": "https://acme.example",
        "phone_number": "  (555) 010-0199  ",
        "company_email": "",
        "brand_values": ["not", "a", "string"],
    }


@pytest.fixture
def sample_profile():
    values = {key: "Not Provided" for key in BRAND_PROFILE_FIELDS}
    values.update(company_name="Acme Roofing", website="https://acme.example")
    return BrandProfile(**values)
