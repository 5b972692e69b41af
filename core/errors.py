"""
Translator service exceptions.

Each exception carries the HTTP status it maps to; the FastAPI handlers in
core.error_handlers turn them into the {error} envelope.
"""
from typing import Optional


class TranslatorServiceError(Exception):
    """Base class for every error the gateway reports to its clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(TranslatorServiceError):
    """A request that is malformed as a whole (e.g. an empty path parameter)."""

    status_code = 400


class NotFoundError(TranslatorServiceError):
    """The query was well-formed but the target does not exist in the provider's data."""

    status_code = 404


class UpstreamError(TranslatorServiceError):
    """Transport failure or provider-reported error."""

    status_code = 500

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
