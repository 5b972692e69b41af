"""
Translator Client

Module-level provider client for the translator service.
Uses BaseTranslatorClient with translator-specific configuration.
"""
from typing import Any

from core import BaseTranslatorClient, TranslatorConfig, UpstreamRequest
from .config import (
    TRANSLATOR_SUBSCRIPTION_KEY,
    TRANSLATOR_BASE_URL,
    TRANSLATOR_REGION,
    TRANSLATOR_API_VERSION,
    TRANSLATOR_CONNECTION_TIMEOUT,
    TRANSLATOR_CONNECTION_POOL_LIMIT,
)

# Built once at import; never mutated afterwards
_config = TranslatorConfig(
    endpoint=TRANSLATOR_BASE_URL,
    subscription_key=TRANSLATOR_SUBSCRIPTION_KEY,
    region=TRANSLATOR_REGION,
    api_version=TRANSLATOR_API_VERSION,
    timeout=TRANSLATOR_CONNECTION_TIMEOUT,
    pool_limit=TRANSLATOR_CONNECTION_POOL_LIMIT,
)

_client = BaseTranslatorClient(_config)


def get_translator_config() -> TranslatorConfig:
    return _config


async def call_translator(request: UpstreamRequest) -> Any:
    """
    Send one request to the translation provider.

    Args:
        request: Built provider request

    Returns:
        Decoded JSON response
    """
    return await _client.call(request)


async def close_session():
    """Close the translator session. Call this on application shutdown."""
    await _client.close()


def get_backend_info() -> dict:
    """Get information about the translator provider configuration."""
    return _client.get_backend_info()
