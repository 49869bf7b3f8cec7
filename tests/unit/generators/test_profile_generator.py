import json

import pytest

from brand_guide.generators.profile_generator import BrandProfileGenerator
from brand_guide.models.schemas import BRAND_PROFILE_FIELDS, NOT_PROVIDED
from brand_guide.services.llm_service import TaskType
from brand_guide.utils.errors import ConfigurationError, ModelTimeoutError, UnparseableOutputError


@pytest.mark.asyncio
async def test_generate_profile(mock_llm_service, mock_settings, sample_profile_payload, response_factory):
    text = "```json\n" + json.dumps(sample_profile_payload) + "\n```"
    mock_llm_service.create_message_with_web_fetch.return_value = response_factory(text)

    profile = await BrandProfileGenerator(mock_llm_service, mock_settings).generate("https://acme.example")

    assert profile.company_name == "Acme Roofing"
    assert profile.phone_number == "(555) 010-0199"
    assert profile.company_email == NOT_PROVIDED
    assert profile.brand_values == NOT_PROVIDED

    kwargs = mock_llm_service.create_message_with_web_fetch.call_args.kwargs
    assert kwargs["task_type"] == TaskType.PROFILE
    assert kwargs["model"] == mock_settings.extraction_model
    assert "https://acme.example" in kwargs["user_message"]
    assert ", ".join(BRAND_PROFILE_FIELDS) in kwargs["system"]


@pytest.mark.asyncio
async def test_empty_object_gives_all_not_provided(mock_llm_service, mock_settings, response_factory):
    mock_llm_service.create_message_with_web_fetch.return_value = response_factory("{}")

    profile = await BrandProfileGenerator(mock_llm_service, mock_settings).generate("https://acme.example")

    assert set(profile.to_dict().values()) == {NOT_PROVIDED}


@pytest.mark.asyncio
async def test_unparseable_output(mock_llm_service, mock_settings, response_factory):
    raw = "I was unable to fetch that page. " * 30
    mock_llm_service.create_message_with_web_fetch.return_value = response_factory(raw)

    with pytest.raises(UnparseableOutputError, match="Brand profile extraction returned invalid JSON.") as exc_info:
        await BrandProfileGenerator(mock_llm_service, mock_settings).generate("https://acme.example")
    assert exc_info.value.raw_preview == raw[:500]


@pytest.mark.asyncio
async def test_no_retry_on_failure(mock_llm_service, mock_settings):
    mock_llm_service.create_message_with_web_fetch.side_effect = ModelTimeoutError(120.0)

    with pytest.raises(ModelTimeoutError):
        await BrandProfileGenerator(mock_llm_service, mock_settings).generate("https://acme.example")
    assert mock_llm_service.create_message_with_web_fetch.await_count == 1


@pytest.mark.asyncio
async def test_missing_key(mock_llm_service, mock_settings):
    mock_llm_service.ensure_configured.side_effect = ConfigurationError("ANTHROPIC_API_KEY is not set")

    with pytest.raises(ConfigurationError):
        await BrandProfileGenerator(mock_llm_service, mock_settings).generate("https://acme.example")
    mock_llm_service.create_message_with_web_fetch.assert_not_called()
