"""
Operation Pipeline

Every endpoint runs the same stages once its request record has been
validated and sanitized by pydantic: build -> call -> project.

An Operation describes one provider capability; the functions here run any
Operation without per-endpoint code.
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional
from urllib.parse import quote, urlencode

from pydantic import BaseModel

from .errors import NotFoundError, UpstreamError
from .translator_client_base import TranslatorConfig, UpstreamRequest

logger = logging.getLogger(__name__)

UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from translator service"

Caller = Callable[[UpstreamRequest], Awaitable[Any]]


@dataclass(frozen=True)
class Operation:
    """
    Descriptor for one provider capability.

    Attributes:
        name: Logical operation name (used in logs)
        method: HTTP method for the provider call
        route: Provider route appended to the endpoint
        project: (provider data, request record) -> response model
        query: request record -> extra query parameters (api-version is always added)
        payload: request record -> JSON payload, or None for bodiless calls
    """
    name: str
    method: str
    route: str
    project: Callable[[Any, Any], Any]
    query: Optional[Callable[[Any], Dict[str, str]]] = None
    payload: Optional[Callable[[Any], Any]] = None


def build_request(operation: Operation, request: BaseModel, config: TranslatorConfig) -> UpstreamRequest:
    """Build the provider URL (all query values encoded) and payload."""
    params = {"api-version": config.api_version}
    if operation.query is not None:
        params.update(operation.query(request))

    url = f"{config.base_url}{operation.route}?{urlencode(params, quote_via=quote)}"
    payload = operation.payload(request) if operation.payload is not None else None

    return UpstreamRequest(
        operation=operation.name,
        method=operation.method,
        url=url,
        payload=payload
    )


async def execute(
    operation: Operation,
    request: BaseModel,
    call: Caller,
    config: TranslatorConfig
) -> Any:
    """
    Run a validated request through build -> call -> project.

    Raises:
        NotFoundError: Projection found no matching entry
        UpstreamError: Provider/transport failure, malformed envelope, or any unexpected error
    """
    upstream_request = build_request(operation, request, config)

    try:
        data = await call(upstream_request)
    except UpstreamError as e:
        logger.error(
            f"[{operation.name.upper()}] UPSTREAM_ERROR | upstream_status={e.upstream_status} | error={e.message}"
        )
        raise
    except Exception as e:
        logger.exception(f"[{operation.name.upper()}] ERROR | error={e}")
        raise UpstreamError(str(e) or "Translator request failed") from e

    try:
        return operation.project(data, request)
    except NotFoundError as e:
        logger.info(f"[{operation.name.upper()}] NOT_FOUND | error={e.message}")
        raise
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.error(f"[{operation.name.upper()}] BAD_ENVELOPE | error={type(e).__name__}: {e}")
        raise UpstreamError(UNEXPECTED_RESPONSE_MESSAGE) from e
