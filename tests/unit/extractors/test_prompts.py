"""
Unit tests for the extraction prompt templates.
"""

from brand_guide.extractors.prompts import (
    BOOLEAN_STYLE_FIELDS,
    BRAND_INTELLIGENCE_JSON_FIELDS,
    LIST_STYLE_FIELDS,
    build_extraction_system_prompt,
    format_model_fetch_prompt,
    format_server_fetch_prompt,
)
from brand_guide.models.schemas import BRAND_INTELLIGENCE_FIELDS


class TestSystemPrompt:

    def test_lists_every_field_in_order(self):
        prompt = build_extraction_system_prompt()
        assert prompt.endswith(
            "BrandIntelligence JSON keys (use these exact keys): " + BRAND_INTELLIGENCE_JSON_FIELDS
        )
        assert BRAND_INTELLIGENCE_JSON_FIELDS.split(", ") == list(BRAND_INTELLIGENCE_FIELDS)

    def test_names_boolean_style_fields(self):
        prompt = build_extraction_system_prompt()
        assert BOOLEAN_STYLE_FIELDS == "handles_insurance_claims, offers_drone_inspections, offers_financing"
        assert f"({BOOLEAN_STYLE_FIELDS})" in prompt

    def test_names_array_fields(self):
        prompt = build_extraction_system_prompt()
        assert LIST_STYLE_FIELDS.startswith("business_goals, unique_differentiators")
        assert "brand_tone" not in LIST_STYLE_FIELDS
        assert f"Arrays must be empty if no data is found ({LIST_STYLE_FIELDS})" in prompt

    def test_server_fetch_prompt_has_no_tool_instructions(self):
        assert "Use web_fetch only for this exact URL" not in build_extraction_system_prompt()

    def test_web_fetch_prompt_restricts_urls(self):
        prompt = build_extraction_system_prompt(web_fetch=True)
        assert "Use web_fetch only for this exact URL. Do not fetch any other URLs." in prompt
        assert prompt.index("Do not fetch any other URLs") < prompt.index("BrandIntelligence JSON keys")

    def test_rules_forbid_fabrication(self):
        prompt = build_extraction_system_prompt()
        assert "Do NOT fabricate facts." in prompt
        assert 'return "Not Provided"' in prompt
        assert "{" not in prompt


class TestUserPrompts:

    def test_server_fetch_prompt(self):
        prompt = format_server_fetch_prompt("https://acme.example", "Acme Roofing")
        assert prompt.startswith("Homepage URL: https://acme.example")
        assert prompt.endswith("Page content (visible text) to analyze:\n\nAcme Roofing")

    def test_server_fetch_prompt_keeps_braces_in_page_text(self):
        prompt = format_server_fetch_prompt("https://acme.example", "price {from} $99")
        assert "price {from} $99" in prompt

    def test_model_fetch_prompt(self):
        prompt = format_model_fetch_prompt("https://acme.example")
        assert "\n\nhttps://acme.example\n\n" in prompt
        assert "Return VALID JSON ONLY" in prompt
