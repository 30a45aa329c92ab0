"""
Exception handlers for the FastAPI application.

Maps the relay exception hierarchy to HTTP responses with an
``{"error": ...}`` body.

Dependencies: fastapi, starlette, inference_relay.core.exceptions
System role: Centralized HTTP error rendering
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inference_relay.core.exceptions import (
    MalformedReferenceError,
    UpstreamProtocolError,
    UpstreamServiceError,
    ValidationError,
)
from inference_relay.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, code: str | None = None) -> JSONResponse:
    content = {"error": message}
    if code:
        content["code"] = code
    return JSONResponse(status_code=status_code, content=content)


def upstream_status(error: UpstreamServiceError) -> int:
    """HTTP status for an upstream failure: the upstream's own 4xx/5xx, else 500."""
    if error.status_code and 400 <= error.status_code < 600:
        return error.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(
        f"{__name__}:validation_error - {request.method} {request.url.path}: {exc}"
    )
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        f"{__name__}:request_validation_error - {request.method} {request.url.path}: "
        f"{exc.errors()}"
    )
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def malformed_reference_handler(
    request: Request, exc: MalformedReferenceError
) -> JSONResponse:
    logger.error(f"{__name__}:malformed_reference - {exc}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def upstream_service_error_handler(
    request: Request, exc: UpstreamServiceError
) -> JSONResponse:
    logger.error(f"{__name__}:upstream_service_error - {exc}")
    return _error(upstream_status(exc), exc.message, exc.code)


async def upstream_protocol_error_handler(
    request: Request, exc: UpstreamProtocolError
) -> JSONResponse:
    logger.error(f"{__name__}:upstream_protocol_error - {exc}")
    return _error(status.HTTP_502_BAD_GATEWAY, exc.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_exception_with_context(
        logger,
        f"{__name__}:unhandled_exception - {request.method} {request.url.path}",
        exc,
        method=request.method,
        path=request.url.path,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all relay exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(MalformedReferenceError, malformed_reference_handler)
    app.add_exception_handler(UpstreamServiceError, upstream_service_error_handler)
    app.add_exception_handler(UpstreamProtocolError, upstream_protocol_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
