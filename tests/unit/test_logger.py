import logging

import structlog

from brand_guide.utils.logger import LogContext, get_logger, setup_logging


def test_setup_logging():
    # Calling it shouldn't crash
    setup_logging(level="DEBUG", json_format=False)
    setup_logging(level="INFO", json_format=True)


def test_setup_logging_quiets_httpx():
    setup_logging(level="DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING


def test_get_logger():
    logger = get_logger("test_module")
    assert logger is not None
    logger.info("test message", key="value")


def test_log_context_binds_and_unbinds():
    with LogContext(request_id="abc123", url="https://acme.example"):
        bound = structlog.contextvars.get_contextvars()
        assert bound["request_id"] == "abc123"
        assert bound["url"] == "https://acme.example"

    assert "request_id" not in structlog.contextvars.get_contextvars()
