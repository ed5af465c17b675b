"""
Response payload utilities for consistent API response formatting.

Provides standardized response structures for success and error cases
with proper HTTP status codes and data formatting.
"""

from typing import Any, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(status_code: int, message: str, data: Optional[Any] = None) -> JSONResponse:
    """
    Returns a JSON response for success responses.

    Args:
        status_code (int): HTTP status code
        message (str): Success message
        data (Any, optional): Response data payload

    Returns:
        JSONResponse: Formatted success response
    """
    response_data = {"status_code": status_code, "success": True, "message": message}

    if data is not None:
        response_data["data"] = data

    return JSONResponse(
        status_code=status_code, content=jsonable_encoder(response_data)
    )


def paginated_response(status_code: int, payload: dict) -> JSONResponse:
    """
    Returns a JSON response for a page of results.

    Args:
        status_code (int): HTTP status code
        payload (dict): Output of format_paginated_response

    Returns:
        JSONResponse: Paginated response with the pagination fields at top level
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"status_code": status_code, **payload}),
    )


def error_response(
    status_code: int,
    message: str = "An error occurred",
    detail: Optional[str] = None,
    errors: Optional[list[str]] = None,
) -> JSONResponse:
    """
    Generate a standardized error response.

    Args:
        status_code (int): HTTP status code
        message (str): Error message
        detail (str, optional): Error code
        errors (list[str], optional): Itemized validation messages

    Returns:
        JSONResponse: Formatted error response
    """
    content = {
        "status_code": status_code,
        "success": False,
        "message": message,
    }
    if detail is not None:
        content["detail"] = detail
    if errors:
        content["errors"] = errors

    return JSONResponse(
        status_code=status_code,
        content=content
    )
