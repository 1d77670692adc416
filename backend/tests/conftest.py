"""Shared test fixtures for all test groups."""

import pytest

from app.core.config import Settings
from fakes import make_reply


@pytest.fixture
def output_dir(tmp_path):
    """Base directory for generated websites, isolated per test."""
    return tmp_path / "generated_websites"


@pytest.fixture
def test_settings(output_dir):
    """Settings with a fake API key and a temporary output directory."""
    return Settings(
        _env_file=None,
        openrouter_api_key="test-openrouter-key",
        generated_websites_dir=str(output_dir),
        provider_timeout_seconds=5.0,
    )


@pytest.fixture
def sample_reply():
    """Model reply for the 'a red button page' scenario."""
    return make_reply({"html": "<h1>Hi</h1>", "css": "h1{color:red}", "js": ""})
