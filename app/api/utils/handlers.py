"""
Exception handlers for the Crustaceans API.

This module provides global exception handlers for FastAPI application.
They are the single place where a failure kind becomes a status code.
"""

import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError

from app.api.utils.exceptions import CrustaceanServiceException, ValidationException
from app.api.utils.response import error_response

logger = logging.getLogger(__name__)


async def crustacean_service_exception_handler(request: Request, exc: CrustaceanServiceException):
    """
    Global exception handler for all CrustaceanServiceException and subclasses.

    Args:
        request (Request): The request that caused the exception
        exc (CrustaceanServiceException): The exception instance

    Returns:
        JSONResponse: Formatted error response
    """
    logger.warning(f"{exc.error_code}: {exc.message} [{request.method} {request.url.path}]")

    errors = exc.errors if isinstance(exc, ValidationException) else None
    return error_response(
        status_code=exc.status_code,
        message=exc.message,
        detail=exc.error_code,
        errors=errors,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Global exception handler for request validation errors.

    Malformed bodies, path IDs and query parameters are all reported
    as 400 with one message per offending field.

    Args:
        request (Request): The request that caused the exception
        exc (RequestValidationError): The validation exception

    Returns:
        JSONResponse: Formatted error response
    """
    error_messages = []

    for error in exc.errors():
        loc = [str(part) for part in error["loc"] if part not in ("body", "query", "path")]
        field = " -> ".join(loc) or "request"
        error_messages.append(f"{field}: {error['msg']}")

    logger.warning(f"Validation error: {error_messages}")

    return error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message="Validation failed",
        detail="VALIDATION_ERROR",
        errors=error_messages,
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Last-resort handler: log the failure, return a 500 without internals.

    Args:
        request (Request): The request that caused the exception
        exc (Exception): The exception instance

    Returns:
        JSONResponse: Generic internal error response
    """
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)

    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal server error",
        detail="INTERNAL_SERVER_ERROR",
    )
