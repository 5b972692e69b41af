"""
Pytest configuration and shared fixtures for translator gateway tests.
"""
import os

# Provider settings must be in place before any project module is imported
os.environ["LOG_TO_FILE"] = "false"
os.environ["TRANSLATOR_KEY"] = "test-key"
os.environ["TRANSLATOR_ENDPOINT"] = "https://translator.test/"
os.environ["TRANSLATOR_LOCATION"] = "westeurope"

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient

from core import TranslatorConfig

TEST_ENDPOINT = "https://translator.test"


@pytest.fixture
def translator_config():
    """An explicit provider config, independent of the environment."""
    return TranslatorConfig(
        endpoint="https://translator.test/",
        subscription_key="test-key",
        region="westeurope",
        api_version="3.0"
    )


@pytest.fixture
def language_catalog():
    """A /languages envelope in the provider's shape."""
    return {
        "translation": {
            "de": {"name": "German", "nativeName": "Deutsch", "dir": "ltr"},
            "fr": {"name": "French", "nativeName": "Français", "dir": "ltr"},
            "es": {"name": "Spanish", "nativeName": "Español", "dir": "ltr"},
            "zh-Hans": {"name": "Chinese Simplified", "nativeName": "中文 (简体)", "dir": "ltr"},
        },
        "transliteration": {},
        "dictionary": {},
    }


@pytest.fixture
def mock_provider():
    """Replace the provider call used by the service endpoints."""
    with patch("translator.service.call_translator", new_callable=AsyncMock) as mock:
        yield mock


@pytest.fixture
def test_client(mock_provider):
    """Create a test client for the FastAPI app."""
    from main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_session():
    """Factory for fake aiohttp sessions whose request() yields a single canned response."""
    def _create(status=200, body=""):
        response = MagicMock()
        response.status = status
        response.text = AsyncMock(return_value=body)

        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        session.request.return_value.__aenter__.return_value = response
        return session

    return _create
