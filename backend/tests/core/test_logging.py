"""Tests for structlog configuration."""

import json
import logging

import pytest
import structlog
from asgi_correlation_id.context import correlation_id

from app.core.logging import configure_structlog

pytestmark = pytest.mark.unit


def _last_entry(capsys) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


def test_stdlib_records_rendered_as_json(capsys):
    configure_structlog(json_logs=True)

    logging.getLogger("tests.stdlib").warning("disk %s", "full")

    entry = _last_entry(capsys)
    assert entry["event"] == "disk full"
    assert entry["level"] == "warning"
    assert entry["logger"] == "tests.stdlib"
    assert "timestamp" in entry


def test_structlog_events_carry_correlation_id(capsys):
    configure_structlog(json_logs=True)
    token = correlation_id.set("req-123")
    try:
        structlog.get_logger("tests.structlog").info("website_generation_started", theme="minimal")
    finally:
        correlation_id.reset(token)

    entry = _last_entry(capsys)
    assert entry["event"] == "website_generation_started"
    assert entry["theme"] == "minimal"
    assert entry["correlation_id"] == "req-123"


def test_noisy_loggers_quieted():
    configure_structlog(log_level="DEBUG")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
