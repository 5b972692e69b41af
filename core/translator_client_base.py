"""
Base Translator Client

Provides the outbound HTTP call to the translation provider.
The provider settings are held in an immutable TranslatorConfig built once
at startup and passed to the client.

Features:
- Fixed header set (subscription key, region, content type)
- Connection pooling per instance
- Request/response logging with latency
- Provider and transport errors surfaced as UpstreamError

Usage:
    config = TranslatorConfig(
        endpoint="https://api.cognitive.microsofttranslator.com",
        subscription_key="...",
        region="westeurope",
    )

    client = BaseTranslatorClient(config)
    data = await client.call(upstream_request)
"""

import json
import asyncio
import aiohttp
from dataclasses import dataclass
from typing import Optional, Dict, Any

from logs.logging_config import (
    get_translator_logger,
    get_request_id,
    log_upstream_request,
    log_upstream_response,
)
from .errors import UpstreamError

logger = get_translator_logger()

TRANSPORT_ERROR_MESSAGE = "Translator service unavailable. Please try again later."
TIMEOUT_ERROR_MESSAGE = "Translator request timed out. Please try again."


@dataclass(frozen=True)
class TranslatorConfig:
    """
    Provider configuration, read-only after construction.

    Example:
        config = TranslatorConfig(
            endpoint="https://api.cognitive.microsofttranslator.com",
            subscription_key="secret",
            region="westeurope",
            api_version="3.0"
        )
    """
    endpoint: str
    subscription_key: str
    region: str
    api_version: str = "3.0"

    # Connection settings
    timeout: int = 300
    pool_limit: int = 50

    @property
    def base_url(self) -> str:
        return self.endpoint.rstrip("/")

    def get_headers(self, trace_id: Optional[str] = None) -> Dict[str, str]:
        """Headers sent with every provider call."""
        headers = {
            "Ocp-Apim-Subscription-Key": self.subscription_key,
            "Ocp-Apim-Subscription-Region": self.region,
            "Content-type": "application/json",
        }
        if trace_id:
            headers["X-ClientTraceId"] = trace_id
        return headers

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary (subscription key masked)."""
        return {
            "endpoint": self.endpoint,
            "region": self.region,
            "api_version": self.api_version,
            "subscription_key_set": bool(self.subscription_key),
            "timeout": self.timeout,
            "pool_limit": self.pool_limit,
        }


@dataclass(frozen=True)
class UpstreamRequest:
    """A fully built provider request."""
    operation: str
    method: str
    url: str
    payload: Optional[Any] = None


def extract_provider_message(data: Any) -> Optional[str]:
    """Return error.message from a provider error body, if there is one."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
    return None


class BaseTranslatorClient:
    """
    Async client for the translation provider.

    One call per incoming request: no retries, no circuit breaking.
    """

    def __init__(self, config: TranslatorConfig):
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

        logger.debug(
            f"[TRANSLATOR_CLIENT] Initialized | endpoint={config.base_url} | "
            f"region={config.region} | api_version={config.api_version}"
        )

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session for this instance."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            connector = aiohttp.TCPConnector(
                limit=self.config.pool_limit,
                limit_per_host=self.config.pool_limit
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector
            )
            logger.debug("[TRANSLATOR_CLIENT] Session created")
        return self._session

    async def close(self):
        """Close this instance's session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
            logger.debug("[TRANSLATOR_CLIENT] Session closed")

    async def call(self, request: UpstreamRequest) -> Any:
        """
        Perform one provider call and return the decoded JSON body.

        Args:
            request: Built request (method, url, optional JSON payload)

        Returns:
            Decoded JSON response

        Raises:
            UpstreamError: On transport failure or a non-2xx provider response
        """
        payload_chars = len(json.dumps(request.payload, ensure_ascii=False)) if request.payload is not None else 0
        entry = log_upstream_request(
            operation=request.operation,
            method=request.method,
            url=request.url,
            payload_chars=payload_chars
        )

        trace_id = get_request_id()
        headers = self.config.get_headers(trace_id if trace_id != "-" else None)

        try:
            session = await self.get_session()
            async with session.request(request.method, request.url, json=request.payload, headers=headers) as r:
                status = r.status
                body = await r.text()

        except asyncio.TimeoutError:
            log_upstream_response(entry, status="error", error_message="timeout")
            raise UpstreamError(TIMEOUT_ERROR_MESSAGE)

        except aiohttp.ClientError as e:
            log_upstream_response(entry, status="error", error_message=str(e) or type(e).__name__)
            raise UpstreamError(TRANSPORT_ERROR_MESSAGE)

        try:
            data = json.loads(body) if body else None
        except ValueError:
            data = None
            if status < 400:
                log_upstream_response(entry, status="error", http_status=status, error_message=body)
                raise UpstreamError("Translator service returned an invalid response", upstream_status=status)

        if status >= 400:
            message = extract_provider_message(data) or f"Translator service returned HTTP {status}"
            log_upstream_response(entry, status="error", http_status=status, error_message=message)
            raise UpstreamError(message, upstream_status=status)

        log_upstream_response(entry, status="success", http_status=status)
        return data

    def get_backend_info(self) -> Dict[str, Any]:
        """Information about this client's provider configuration."""
        return self.config.to_dict()
