"""
Claude API service for the brand guide pipeline.

This module is the single seam between the pipeline and Anthropic's SDK. It
issues plain message calls and web-fetch tool calls, enforces the client-side
timeout, assembles the text blocks of a response, detects web fetch tool
failures reported inside the payload, and tracks token usage.

Key Features:
    - Async/await support for non-blocking operations
    - Client-side timeout on every call, surfaced as ModelTimeoutError
    - Anthropic SDK errors translated into ModelCallError
    - Web fetch tool (beta) support scoped by a per-call use quota
    - Token counting and cost estimation

Example:
    >>> async with ClaudeService(settings) as service:
    ...     response = await service.create_message(system, prompt)
    ...     print(response.text)
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

import anthropic
from anthropic import APIError, APIStatusError

from brand_guide.config.settings import Settings, get_settings
from brand_guide.utils.errors import ModelCallError, ModelTimeoutError
from brand_guide.utils.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Constants and Enums
# =============================================================================

class TaskType(str, Enum):
    """Task types, used to label calls in logs and usage records."""
    EXTRACTION = "extraction"
    PROFILE = "profile"
    BRAND_GUIDE = "brand_guide"


# Beta header value required for the web fetch tool
WEB_FETCH_BETA = "web-fetch-2025-09-10"
WEB_FETCH_TOOL_TYPE = "web_fetch_20250910"
WEB_FETCH_MAX_USES = 5

WEB_FETCH_TOOL_RESULT = "web_fetch_tool_result"
WEB_FETCH_TOOL_RESULT_ERROR = "web_fetch_tool_result_error"

# Token costs per model (per 1K tokens)
TOKEN_COSTS = {
    "claude-sonnet-4-20250514": {"input": 0.003, "output": 0.015},
    "claude-3-5-sonnet-20241022": {"input": 0.003, "output": 0.015},
    "claude-3-5-haiku-20241022": {"input": 0.0008, "output": 0.004},
}


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class TokenUsage:
    """Token usage tracking for a single request."""
    input_tokens: int = 0
    output_tokens: int = 0
    estimated_cost: float = 0.0
    model: str = ""
    task_type: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def calculate_cost(self) -> float:
        """Calculate estimated cost based on token usage."""
        costs = TOKEN_COSTS.get(self.model)
        if costs:
            self.estimated_cost = (
                (self.input_tokens / 1000) * costs["input"]
                + (self.output_tokens / 1000) * costs["output"]
            )
        return self.estimated_cost


@dataclass
class ModelResponse:
    """Text and tool outcome of one model call."""
    text: str
    usage: TokenUsage
    web_fetch_error: bool = False


# =============================================================================
# Response Helpers
# =============================================================================

def collect_text(content: Optional[list[Any]]) -> str:
    """Concatenate the text of every text block in a response."""
    parts: list[str] = []
    for block in content or []:
        text = getattr(block, "text", None)
        if getattr(block, "type", None) == "text" and isinstance(text, str):
            parts.append(text)
    return "".join(parts)


def has_web_fetch_error(content: Optional[list[Any]]) -> bool:
    """True if any web fetch tool result in the response reports an error."""
    for block in content or []:
        if getattr(block, "type", None) != WEB_FETCH_TOOL_RESULT:
            continue
        result = getattr(block, "content", None)
        if result is None:
            continue
        result_type = result.get("type") if isinstance(result, dict) else getattr(result, "type", None)
        if result_type == WEB_FETCH_TOOL_RESULT_ERROR:
            return True
    return False


# =============================================================================
# Main Service Class
# =============================================================================

class ClaudeService:
    """
    Claude API client wrapper.

    The Anthropic client is created on first use so that constructing the
    service never needs credentials; callers invoke ensure_configured() at their
    entry point to fail fast before any network activity.

    Attributes:
        settings: Application settings
        token_usage_history: List of token usage records
        total_cost: Running total of estimated API costs
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[anthropic.AsyncAnthropic] = None,
    ):
        self.settings = settings or get_settings()
        self._client = client
        self.token_usage_history: list[TokenUsage] = []
        self.total_cost: float = 0.0

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            # Retries are owned by the extraction strategies, not the SDK
            self._client = anthropic.AsyncAnthropic(
                api_key=self.settings.require_api_key(),
                max_retries=0,
            )
        return self._client

    def ensure_configured(self) -> None:
        """Raise ConfigurationError now if the API key is missing."""
        self.settings.require_api_key()

    async def __aenter__(self) -> "ClaudeService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client connection."""
        if self._client is not None:
            await self._client.close()
        logger.debug(
            "ClaudeService closed",
            total_requests=len(self.token_usage_history),
            total_cost=f"${self.total_cost:.4f}",
        )

    # =========================================================================
    # Public Methods
    # =========================================================================

    async def create_message(
        self,
        system: str,
        user_message: str,
        model: Optional[str] = None,
        task_type: TaskType = TaskType.EXTRACTION,
    ) -> ModelResponse:
        """
        Plain message call.

        Raises:
            ConfigurationError: If the API key is missing.
            ModelTimeoutError: If the client-side timeout elapses.
            ModelCallError: On any API or transport failure.
        """
        model = model or self.settings.extraction_model
        return await self._call_api(
            self.client.messages.create(
                model=model,
                max_tokens=self.settings.max_tokens,
                system=system,
                messages=[{"role": "user", "content": user_message}],
            ),
            model=model,
            task_type=task_type,
        )

    async def create_message_with_web_fetch(
        self,
        system: str,
        user_message: str,
        model: Optional[str] = None,
        task_type: TaskType = TaskType.EXTRACTION,
        max_uses: int = WEB_FETCH_MAX_USES,
    ) -> ModelResponse:
        """
        Message call with the web fetch tool enabled.

        A tool failure reported inside the response does not raise here; it is
        returned as ModelResponse.web_fetch_error for the caller to act on.
        """
        model = model or self.settings.extraction_model
        return await self._call_api(
            self.client.beta.messages.create(
                model=model,
                max_tokens=self.settings.max_tokens,
                system=system,
                messages=[{"role": "user", "content": user_message}],
                tools=[
                    {
                        "type": WEB_FETCH_TOOL_TYPE,
                        "name": "web_fetch",
                        "max_uses": max_uses,
                    }
                ],
                betas=[WEB_FETCH_BETA],
            ),
            model=model,
            task_type=task_type,
        )

    # =========================================================================
    # Core API Method
    # =========================================================================

    async def _call_api(
        self,
        request: Any,
        model: str,
        task_type: TaskType,
    ) -> ModelResponse:
        """Await a pending SDK request under the client-side timeout."""
        timeout = self.settings.web_fetch_timeout_seconds
        start_time = time.time()

        try:
            response = await asyncio.wait_for(request, timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Model call timed out", task_type=task_type.value, timeout_seconds=timeout)
            raise ModelTimeoutError(timeout)
        except APIStatusError as e:
            if e.status_code == 401:
                logger.error("Authentication failed", error=str(e))
                raise ModelCallError(f"Authentication failed: {e}", details={"status_code": 401}) from e
            logger.error("API error", task_type=task_type.value, status_code=e.status_code, error=str(e))
            raise ModelCallError(f"API error: {e}", details={"status_code": e.status_code}) from e
        except APIError as e:
            logger.error("API request failed", task_type=task_type.value, error=str(e))
            raise ModelCallError(f"API request failed: {e}") from e

        content = getattr(response, "content", None) or []
        usage = self._record_usage(response, model, task_type)

        result = ModelResponse(
            text=collect_text(content),
            usage=usage,
            web_fetch_error=has_web_fetch_error(content),
        )

        logger.info(
            "API call completed",
            task_type=task_type.value,
            model=model,
            elapsed_seconds=f"{time.time() - start_time:.2f}",
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            text_length=len(result.text),
            web_fetch_error=result.web_fetch_error,
        )
        return result

    def _record_usage(self, response: Any, model: str, task_type: TaskType) -> TokenUsage:
        raw_usage = getattr(response, "usage", None)
        input_tokens = getattr(raw_usage, "input_tokens", 0)
        output_tokens = getattr(raw_usage, "output_tokens", 0)
        usage = TokenUsage(
            input_tokens=input_tokens if isinstance(input_tokens, int) else 0,
            output_tokens=output_tokens if isinstance(output_tokens, int) else 0,
            model=model,
            task_type=task_type.value,
        )
        usage.calculate_cost()
        self.token_usage_history.append(usage)
        self.total_cost += usage.estimated_cost
        return usage

    def get_usage_stats(self) -> dict[str, Any]:
        """Get usage statistics for the service."""
        total_input = sum(u.input_tokens for u in self.token_usage_history)
        total_output = sum(u.output_tokens for u in self.token_usage_history)
        return {
            "total_requests": len(self.token_usage_history),
            "total_input_tokens": total_input,
            "total_output_tokens": total_output,
            "total_tokens": total_input + total_output,
            "total_cost": self.total_cost,
        }


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "ClaudeService",
    "ModelResponse",
    "TaskType",
    "TokenUsage",
    "WEB_FETCH_BETA",
    "collect_text",
    "has_web_fetch_error",
]
