"""Utils module for the Brand Guide Pipeline."""

from brand_guide.utils.logger import LogContext, get_logger, setup_logging
from brand_guide.utils.errors import (
    BrandGuideError,
    ConfigurationError,
    ErrorHandler,
    ErrorType,
    ModelCallError,
    ModelTimeoutError,
    PageFetchError,
    UnparseableOutputError,
)
from brand_guide.utils.json_recovery import extract_first_json_object
from brand_guide.utils.text import EXTRACTION_TEXT_MAX_LENGTH, sanitize_html

__all__ = [
    "get_logger",
    "setup_logging",
    "LogContext",
    "BrandGuideError",
    "ConfigurationError",
    "ErrorHandler",
    "ErrorType",
    "ModelCallError",
    "ModelTimeoutError",
    "PageFetchError",
    "UnparseableOutputError",
    "extract_first_json_object",
    "EXTRACTION_TEXT_MAX_LENGTH",
    "sanitize_html",
]
