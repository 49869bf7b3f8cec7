import pytest

from brand_guide.generators.guide_generator import (
    BrandGuideGenerator,
    format_brand_intelligence_for_prompt,
)
from brand_guide.generators.prompts import GUIDE_SECTIONS
from brand_guide.models.schemas import BrandIntelligence
from brand_guide.services.llm_service import TaskType
from brand_guide.utils.errors import ConfigurationError, ModelCallError


# =============================================================================
# Inputs block
# =============================================================================

def test_inputs_block_lists_every_field(sample_brand_intelligence):
    block = format_brand_intelligence_for_prompt(sample_brand_intelligence)
    lines = block.split("\n")

    assert lines[0] == "Business name: Acme Roofing"
    assert lines[1] == "Logo URL: https://acme.example/logo.svg"
    assert lines[2] == "Origin story: Not Provided"
    assert lines[-1] == "Reference example content: Not Provided"
    assert len([line for line in lines if not line.startswith("  - ")]) == 27


def test_inputs_block_lists_and_booleans(sample_brand_intelligence):
    block = format_brand_intelligence_for_prompt(sample_brand_intelligence)

    assert "Core values:\n  - Integrity\n  - Craftsmanship\n" in block
    assert "Handles insurance claims: Yes" in block
    assert "Offers drone inspections: No" in block
    assert "Offers financing: Not Provided" in block
    assert "Year founded: 1998" in block


def test_inputs_block_list_in_free_text_field():
    brand = BrandIntelligence(brand_tone=["Warm", "Direct"])
    block = format_brand_intelligence_for_prompt(brand)
    assert "Brand tone:\n  - Warm\n  - Direct\n" in block


def test_inputs_block_treats_not_provided_and_blank_as_missing():
    brand = BrandIntelligence(business_name="Not Provided", origin_story="   ", business_goals=[])
    block = format_brand_intelligence_for_prompt(brand)

    assert "Business name: Not Provided" in block
    assert "Origin story: Not Provided" in block
    assert "Business goals: Not Provided" in block


def test_inputs_block_for_empty_brand():
    block = format_brand_intelligence_for_prompt(BrandIntelligence())
    assert all(line.endswith(": Not Provided") for line in block.split("\n"))


# =============================================================================
# Generator
# =============================================================================

@pytest.mark.asyncio
async def test_generate_markdown(mock_llm_service, mock_settings, sample_brand_intelligence, response_factory):
    mock_llm_service.create_message.return_value = response_factory("\n\n### Mission Statement\n\nBuild roofs.\n  ")
    generator = BrandGuideGenerator(mock_llm_service, mock_settings)

    markdown = await generator.generate_markdown(sample_brand_intelligence)

    assert markdown == "### Mission Statement\n\nBuild roofs."
    kwargs = mock_llm_service.create_message.call_args.kwargs
    assert kwargs["model"] == mock_settings.brand_guide_model
    assert kwargs["task_type"] == TaskType.BRAND_GUIDE
    assert kwargs["user_message"].startswith(
        "Use ONLY the inputs below. Do not invent or infer missing information. Output Markdown only."
        "\n\n--- Inputs ---\n\nBusiness name: Acme Roofing"
    )
    for section in GUIDE_SECTIONS:
        assert f"### {section}" in kwargs["system"]


@pytest.mark.asyncio
async def test_generate_markdown_uses_guide_model(
    mock_llm_service, settings_factory, sample_brand_intelligence, response_factory
):
    settings = settings_factory(ANTHROPIC_BRANDGUIDE_MODEL="claude-guide-model")
    mock_llm_service.create_message.return_value = response_factory("# Guide")

    await BrandGuideGenerator(mock_llm_service, settings).generate_markdown(sample_brand_intelligence)

    assert mock_llm_service.create_message.call_args.kwargs["model"] == "claude-guide-model"


@pytest.mark.asyncio
async def test_missing_key(mock_llm_service, mock_settings, sample_brand_intelligence):
    mock_llm_service.ensure_configured.side_effect = ConfigurationError("ANTHROPIC_API_KEY is not set")

    with pytest.raises(ConfigurationError):
        await BrandGuideGenerator(mock_llm_service, mock_settings).generate_markdown(sample_brand_intelligence)
    mock_llm_service.create_message.assert_not_called()


@pytest.mark.asyncio
async def test_api_failure_propagates(mock_llm_service, mock_settings, sample_brand_intelligence):
    mock_llm_service.create_message.side_effect = ModelCallError("API error: 500")

    with pytest.raises(ModelCallError):
        await BrandGuideGenerator(mock_llm_service, mock_settings).generate_markdown(sample_brand_intelligence)
