"""
Claude prompts for brand intelligence extraction.

Both retrieval strategies share the same extraction rules and the same JSON key
list; the web fetch variant adds the instruction that scopes the tool to the
single requested URL.

Prompt Categories:
    1. Server-fetched extraction - page text is supplied in the user message
    2. Model-fetched extraction - Claude retrieves the page with web_fetch
"""

from brand_guide.models.schemas import BRAND_INTELLIGENCE_FIELDS, FieldKind


# =============================================================================
# Field Lists
# =============================================================================

BOOLEAN_STYLE_FIELDS = ", ".join(
    name for name, kind in BRAND_INTELLIGENCE_FIELDS.items() if kind is FieldKind.BOOLEAN
)

LIST_STYLE_FIELDS = ", ".join(
    name for name, kind in BRAND_INTELLIGENCE_FIELDS.items() if kind is FieldKind.TEXT_OR_LIST
)

BRAND_INTELLIGENCE_JSON_FIELDS = ", ".join(BRAND_INTELLIGENCE_FIELDS)


# =============================================================================
# System Prompts
# =============================================================================

EXTRACTION_SYSTEM = """You are a Brand Intelligence Extraction AI.

Your task is to:

Fetch and read the full contents of the provided homepage URL.

Extract brand, business, and positioning information ONLY from the visible content.

Return structured JSON suitable for downstream brand and design systems.

IMPORTANT RULES:

Do NOT use prior knowledge of the business.

Do NOT fabricate facts.

If information is not clearly present or reasonably supported, return "Not Provided".

Conservative accuracy is preferred over completeness.

Reasonable inference is allowed ONLY for tone, perception, and emotional qualities, not for operational facts.

LOGO URL RULES:

Attempt to identify the primary brand logo from:

Header or navigation image

SVG used as a logo

Image with "logo" in filename or alt text

If multiple logos exist, choose the primary brand logo.

If no clear logo is found, return null.

OUTPUT FORMAT:

Return VALID JSON ONLY

Do not include commentary, explanations, or markdown

Output must conform to the BrandIntelligence interface

FIELD RULES:

Use "Yes", "No", or "Not Provided" for boolean-style fields ({boolean_fields})

Arrays must be empty if no data is found ({list_fields})

Do not infer financing, insurance handling, drone usage, or founding year unless explicitly stated"""

WEB_FETCH_INSTRUCTIONS = """Use web_fetch only for this exact URL. Do not fetch any other URLs.
After you receive the page content, extract brand information and return the BrandIntelligence JSON as specified above."""

FIELD_LIST_SUFFIX = "BrandIntelligence JSON keys (use these exact keys): {fields}"


# =============================================================================
# User Prompts
# =============================================================================

SERVER_FETCH_USER = """Homepage URL: {url}

Page content (visible text) to analyze:

{visible_text}"""

MODEL_FETCH_USER = """Fetch this exact URL and extract brand intelligence from its visible content:

{url}

Use the web_fetch tool to retrieve the page, then extract and return a single JSON object conforming to the BrandIntelligence interface (the exact keys you were given). Return VALID JSON ONLY, no commentary or markdown."""


# =============================================================================
# Formatters
# =============================================================================

def build_extraction_system_prompt(web_fetch: bool = False) -> str:
    """System prompt for either strategy, ending with the exact key list."""
    rules = EXTRACTION_SYSTEM.format(
        boolean_fields=BOOLEAN_STYLE_FIELDS,
        list_fields=LIST_STYLE_FIELDS,
    )
    parts = [rules]
    if web_fetch:
        parts.append(WEB_FETCH_INSTRUCTIONS)
    parts.append(FIELD_LIST_SUFFIX.format(fields=BRAND_INTELLIGENCE_JSON_FIELDS))
    return "\n\n".join(parts)


def format_server_fetch_prompt(url: str, visible_text: str) -> str:
    return SERVER_FETCH_USER.format(url=url, visible_text=visible_text)


def format_model_fetch_prompt(url: str) -> str:
    return MODEL_FETCH_USER.format(url=url)
