"""
Logging setup and upstream call logging for the translator gateway.

Every record carries the current request_id (set per inbound request by the
HTTP middleware), so a single request can be followed from the route handler
down to the provider call.
"""
import time
import uuid
import logging
from contextvars import ContextVar
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import (
    LOG_LEVEL,
    LOG_TO_FILE,
    LOG_OUTPUT_DIR,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    LOG_PREVIEW_LENGTH,
    LOG_DATE_FORMAT,
    LOG_DETAILED_FORMAT,
    LOG_SIMPLE_FORMAT,
    LOG_FILE_REQUESTS,
    LOG_FILE_ERRORS,
)

LOG_DIR = Path(LOG_OUTPUT_DIR)

UPSTREAM_LOGGER_NAME = "translator.upstream"

_request_id: ContextVar[str] = ContextVar("request_id", default="-")
_configured = False


# =========================
# Request Context
# =========================

def generate_request_id() -> str:
    """Generate a unique request ID."""
    return str(uuid.uuid4())


def set_request_id(request_id: str):
    """Set the request ID for the current context. Returns a reset token."""
    return _request_id.set(request_id)


def get_request_id() -> str:
    return _request_id.get()


def clear_request_id(token=None) -> None:
    if token is not None:
        _request_id.reset(token)
    else:
        _request_id.set("-")


class RequestContext:
    """
    Scope a request ID to a block of code.

    Usage:
        with RequestContext(request_id) as rid:
            ...
    """

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id or generate_request_id()
        self._token = None

    def __enter__(self) -> str:
        self._token = set_request_id(self.request_id)
        return self.request_id

    def __exit__(self, exc_type, exc, tb):
        clear_request_id(self._token)
        return False


class RequestIdFilter(logging.Filter):
    """Attach the current request_id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


# =========================
# Setup
# =========================

def setup_translator_logging(level: Optional[str] = None, log_to_file: Optional[bool] = None) -> logging.Logger:
    """
    Configure the root logger (console + optional rotating files).

    Safe to call more than once; handlers are only installed the first time.
    """
    global _configured

    root = logging.getLogger()
    if _configured:
        return root

    root.setLevel(level or LOG_LEVEL)

    request_filter = RequestIdFilter()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_SIMPLE_FORMAT, datefmt=LOG_DATE_FORMAT))
    console.addFilter(request_filter)
    root.addHandler(console)

    if LOG_TO_FILE if log_to_file is None else log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        detailed = logging.Formatter(LOG_DETAILED_FORMAT, datefmt=LOG_DATE_FORMAT)

        requests_handler = RotatingFileHandler(
            LOG_DIR / LOG_FILE_REQUESTS,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        requests_handler.setFormatter(detailed)
        requests_handler.addFilter(request_filter)
        root.addHandler(requests_handler)

        errors_handler = RotatingFileHandler(
            LOG_DIR / LOG_FILE_ERRORS,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        errors_handler.setLevel(logging.ERROR)
        errors_handler.setFormatter(detailed)
        errors_handler.addFilter(request_filter)
        root.addHandler(errors_handler)

    _configured = True
    root.debug(f"[LOGGING] Configured | level={root.level} | dir={LOG_DIR}")
    return root


def get_translator_logger() -> logging.Logger:
    """Logger used for outbound provider calls."""
    return logging.getLogger(UPSTREAM_LOGGER_NAME)


# =========================
# Upstream Call Logging
# =========================

@dataclass
class UpstreamRequestLog:
    """Outbound provider request (never includes credentials)."""
    request_id: str
    operation: str
    method: str
    url: str
    payload_chars: int
    timestamp: float


@dataclass
class UpstreamResponseLog:
    """Outcome of an outbound provider request."""
    request_id: str
    operation: str
    status: str
    http_status: Optional[int]
    latency_ms: float
    error_message: Optional[str] = None


def _preview(text: str) -> str:
    if len(text) <= LOG_PREVIEW_LENGTH:
        return text
    return text[:LOG_PREVIEW_LENGTH] + "..."


def log_upstream_request(operation: str, method: str, url: str, payload_chars: int = 0) -> UpstreamRequestLog:
    """Log an outbound provider request and return its log record."""
    entry = UpstreamRequestLog(
        request_id=get_request_id(),
        operation=operation,
        method=method,
        url=url,
        payload_chars=payload_chars,
        timestamp=time.time()
    )
    get_translator_logger().info(
        f"[UPSTREAM] REQUEST | op={operation} | method={method} | "
        f"url={url} | payload_chars={payload_chars}"
    )
    return entry


def log_upstream_response(
    request: UpstreamRequestLog,
    status: str,
    http_status: Optional[int] = None,
    error_message: Optional[str] = None
) -> UpstreamResponseLog:
    """Log the outcome of an outbound provider request."""
    entry = UpstreamResponseLog(
        request_id=request.request_id,
        operation=request.operation,
        status=status,
        http_status=http_status,
        latency_ms=round((time.time() - request.timestamp) * 1000, 2),
        error_message=_preview(error_message) if error_message else None
    )
    logger = get_translator_logger()
    if status == "success":
        logger.info(
            f"[UPSTREAM] RESPONSE | op={entry.operation} | http_status={http_status} | "
            f"latency_ms={entry.latency_ms}"
        )
    else:
        logger.error(
            f"[UPSTREAM] FAILED | op={entry.operation} | http_status={http_status} | "
            f"latency_ms={entry.latency_ms} | error={entry.error_message}"
        )
    return entry
