"""
Services package for the Brand Guide Pipeline.

This package contains the I/O seams of the pipeline.

Services:
    - ClaudeService: Anthropic Claude calls, with and without the web fetch tool
    - PageFetcher: server-side HTML retrieval over httpx
"""

from brand_guide.services.llm_service import (
    ClaudeService,
    ModelResponse,
    TaskType,
    TokenUsage,
    WEB_FETCH_BETA,
)
from brand_guide.services.page_fetcher import PageFetcher, USER_AGENT

__all__ = [
    # LLM Service
    "ClaudeService",
    "ModelResponse",
    "TaskType",
    "TokenUsage",
    "WEB_FETCH_BETA",
    # Page Fetcher
    "PageFetcher",
    "USER_AGENT",
]
