"""
Logs Module

Provides:
- Logging configuration (console + rotating files)
- Upstream request/response logging with latency
- Request ID tracking across a request's lifetime
"""

from .logging_config import (
    setup_translator_logging,
    get_translator_logger,
    log_upstream_request,
    log_upstream_response,
    RequestContext,
    RequestIdFilter,
    set_request_id,
    get_request_id,
    clear_request_id,
    generate_request_id,
    LOG_DIR,
    UpstreamRequestLog,
    UpstreamResponseLog
)

__all__ = [
    "setup_translator_logging",
    "get_translator_logger",
    "log_upstream_request",
    "log_upstream_response",
    "RequestContext",
    "RequestIdFilter",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    "generate_request_id",
    "LOG_DIR",
    "UpstreamRequestLog",
    "UpstreamResponseLog"
]
