"""
Core Module

Shared infrastructure components for the translator gateway:
- Translator client base class and immutable provider config
- Input sanitizer and request field rules
- Operation pipeline (build -> call -> project)
- Error taxonomy and FastAPI error handlers
"""

from .translator_client_base import BaseTranslatorClient, TranslatorConfig, UpstreamRequest
from .sanitizer import sanitize
from .validators import (
    validate_text,
    validate_language_code,
    validate_string,
    field_errors,
)
from .errors import (
    TranslatorServiceError,
    BadRequestError,
    NotFoundError,
    UpstreamError,
)
from .pipeline import Operation, build_request, execute
from .error_handlers import register_exception_handlers

__all__ = [
    "BaseTranslatorClient",
    "TranslatorConfig",
    "UpstreamRequest",
    "sanitize",
    "validate_text",
    "validate_language_code",
    "validate_string",
    "field_errors",
    "TranslatorServiceError",
    "BadRequestError",
    "NotFoundError",
    "UpstreamError",
    "Operation",
    "build_request",
    "execute",
    "register_exception_handlers",
]
