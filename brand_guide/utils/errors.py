"""
Error taxonomy and centralized error categorization.

Every failure raised by the pipeline is a BrandGuideError subclass so that the
calling layer can catch a single base type and translate it into a user-facing
message.
"""

import asyncio
from enum import Enum
from typing import Optional


class ErrorType(str, Enum):
    """Error type classification."""
    CONFIGURATION_ERROR = "configuration_error"
    TRANSPORT_ERROR = "transport_error"
    MODEL_CALL_ERROR = "model_call_error"
    TIMEOUT_ERROR = "timeout_error"
    UNPARSEABLE_OUTPUT_ERROR = "unparseable_output_error"
    VALIDATION_ERROR = "validation_error"
    INTERNAL_ERROR = "internal_error"


# =============================================================================
# Custom Exceptions
# =============================================================================

class BrandGuideError(Exception):
    """Base application exception."""

    error_type: ErrorType = ErrorType.INTERNAL_ERROR

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(BrandGuideError):
    """Required configuration (the API credential) is missing."""
    error_type = ErrorType.CONFIGURATION_ERROR


class PageFetchError(BrandGuideError):
    """Page fetch network failure or non-2xx response."""
    error_type = ErrorType.TRANSPORT_ERROR

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message, details={"url": url, "status_code": status_code})
        self.url = url
        self.status_code = status_code


class ModelCallError(BrandGuideError):
    """Model API transport/status failure, or a tool error reported in the response."""
    error_type = ErrorType.MODEL_CALL_ERROR


class ModelTimeoutError(ModelCallError):
    """The client-side timeout elapsed before the model call completed."""
    error_type = ErrorType.TIMEOUT_ERROR

    def __init__(self, timeout_seconds: float):
        super().__init__(
            f"Request timed out after {int(timeout_seconds * 1000)}ms",
            details={"timeout_seconds": timeout_seconds},
        )
        self.timeout_seconds = timeout_seconds


class UnparseableOutputError(BrandGuideError):
    """The model response contained no recoverable JSON object."""
    error_type = ErrorType.UNPARSEABLE_OUTPUT_ERROR

    PREVIEW_LENGTH = 500

    def __init__(self, message: str, raw_text: str):
        self.raw_preview = raw_text[: self.PREVIEW_LENGTH]
        super().__init__(
            f"{message} Raw response (first {self.PREVIEW_LENGTH} chars): {self.raw_preview}",
            details={"raw_length": len(raw_text)},
        )


# =============================================================================
# Error Handler
# =============================================================================

class ErrorHandler:
    """Centralized error categorization."""

    @staticmethod
    def categorize_error(error: Exception) -> str:
        """Categorize errors for display at the CLI boundary."""
        if isinstance(error, BrandGuideError):
            return error.error_type.value.upper()
        if isinstance(error, (asyncio.TimeoutError, TimeoutError)):
            return "TIMEOUT_ERROR"
        if isinstance(error, (ConnectionError, OSError)):
            return "TRANSPORT_ERROR"
        if isinstance(error, (ValueError, TypeError)):
            return "VALIDATION_ERROR"

        err_str = str(error).lower()
        if "timeout" in err_str or "timed out" in err_str:
            return "TIMEOUT_ERROR"
        if "api key" in err_str or "unauthorized" in err_str:
            return "CONFIGURATION_ERROR"
        if "connection" in err_str:
            return "TRANSPORT_ERROR"

        return "UNKNOWN_ERROR"

    @staticmethod
    def is_strategy_failure(error: Exception) -> bool:
        """Whether a retrieval strategy may fall through to the next one."""
        return isinstance(error, BrandGuideError) and not isinstance(error, ConfigurationError)
