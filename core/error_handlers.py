"""
Error Mapper

FastAPI exception handlers that render every failure as either
{"errors": [...]} (validation) or {"error": "..."} (everything else).
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas import ErrorResponse, ValidationErrorResponse
from .errors import TranslatorServiceError
from .validators import field_errors

logger = logging.getLogger(__name__)

INVALID_ROUTE_MESSAGE = "Invalid route"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = field_errors(exc.errors())
    logger.warning(
        f"[VALIDATION] REJECTED | path={request.url.path} | "
        f"params={[e.param for e in errors]}"
    )
    body = ValidationErrorResponse(errors=errors)
    return JSONResponse(status_code=400, content=body.model_dump())


async def translator_error_handler(request: Request, exc: TranslatorServiceError) -> JSONResponse:
    logger.info(
        f"[ERROR] {type(exc).__name__} | path={request.url.path} | "
        f"status={exc.status_code} | error={exc.message}"
    )
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and known paths with the wrong method are both "invalid routes"
    if exc.status_code in (404, 405):
        logger.info(f"[ROUTE] INVALID | method={request.method} | path={request.url.path}")
        return error_response(404, INVALID_ROUTE_MESSAGE)
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[SERVER] UNHANDLED | path={request.url.path} | error={exc}")
    return error_response(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(TranslatorServiceError, translator_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
