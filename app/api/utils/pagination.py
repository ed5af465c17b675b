"""
Pagination utilities.

Converts page-oriented requests (page, limit) into offset-oriented query
parameters and turns row counts back into response metadata.

Two entry points deliberately disagree on bad input: validate_pagination_params
reports violations for the caller to reject, while resolve_pagination always
repairs them into something queryable. A limit of 0 is rejected by the former
and silently becomes the default limit in the latter.
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from config import settings

T = TypeVar("T")

DEFAULT_LIMIT = settings.DEFAULT_PAGE_LIMIT
MAX_LIMIT = settings.MAX_PAGE_LIMIT


class PaginationParams(BaseModel):
    """Raw pagination parameters as received from the caller."""
    limit: Optional[int] = Field(default=None, description="Items per page")
    page: Optional[int] = Field(default=None, description="Page number (starting from 1)")


class PaginationResult(BaseModel):
    """Resolved pagination ready for a LIMIT/OFFSET query."""
    limit: int
    page: int
    offset: int


class PaginationInfo(BaseModel):
    """Pagination metadata derived from a row count."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_rows: int
    total_pages: int
    current_page: int
    limit: int
    has_next_page: bool
    has_previous_page: bool


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response wrapper."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    message: str
    data: list[T]
    total_rows: int
    total_pages: int
    current_page: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def create(
        cls,
        data: list[T],
        total_rows: int,
        limit: int,
        page: int,
        message: str = "Data retrieved successfully",
    ) -> "PaginatedResponse[T]":
        """
        Create a paginated response.

        Args:
            data: Items for the current page
            total_rows: Total number of items across all pages
            limit: Resolved number of items per page
            page: Resolved current page number
            message: Message included in the envelope

        Returns:
            PaginatedResponse: Paginated response object
        """
        info = calculate_pagination_info(total_rows, limit, page)
        return cls(
            message=message,
            data=data,
            total_rows=info.total_rows,
            total_pages=info.total_pages,
            current_page=info.current_page,
            has_next_page=info.has_next_page,
            has_previous_page=info.has_previous_page,
        )


def resolve_pagination(params: PaginationParams) -> PaginationResult:
    """
    Resolve raw parameters into a usable (limit, page, offset) triple.

    Missing or zero values fall back to the defaults. A limit above the
    ceiling is clamped to it; a negative limit is reset to the default
    rather than clamped to 1. A page below 1 is clamped to 1.

    Args:
        params: Raw pagination parameters

    Returns:
        PaginationResult: limit in [1, MAX_LIMIT], page >= 1, offset >= 0
    """
    limit = params.limit or DEFAULT_LIMIT
    page = params.page or 1

    if limit > MAX_LIMIT:
        limit = MAX_LIMIT
    if limit < 1:
        limit = DEFAULT_LIMIT

    if page < 1:
        page = 1

    return PaginationResult(limit=limit, page=page, offset=(page - 1) * limit)


def calculate_pagination_info(total_rows: int, limit: int, page: int) -> PaginationInfo:
    """
    Calculate pagination metadata for a result set.

    Args:
        total_rows: Number of rows matching the filters, ignoring pagination
        limit: Resolved items per page
        page: Resolved current page

    Returns:
        PaginationInfo: Total pages and navigation flags
    """
    total_pages = (total_rows + limit - 1) // limit if total_rows > 0 else 0
    return PaginationInfo(
        total_rows=total_rows,
        total_pages=total_pages,
        current_page=page,
        limit=limit,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


def validate_pagination_params(params: PaginationParams) -> list[str]:
    """
    Collect violation messages for out-of-range pagination parameters.

    Args:
        params: Raw pagination parameters

    Returns:
        list[str]: Violation messages, empty when the parameters are valid
    """
    errors: list[str] = []

    if params.limit is not None:
        if params.limit < 1:
            errors.append("Limit must be greater than 0")
        if params.limit > MAX_LIMIT:
            errors.append(f"Limit cannot exceed {MAX_LIMIT}")

    if params.page is not None and params.page < 1:
        errors.append("Page must be greater than 0")

    return errors


def format_paginated_response(
    data: list,
    total_rows: int,
    limit: int,
    page: int,
    message: str = "Data retrieved successfully",
) -> dict:
    """Build the camelCase paginated payload for a list endpoint."""
    return PaginatedResponse.create(
        data=data,
        total_rows=total_rows,
        limit=limit,
        page=page,
        message=message,
    ).model_dump(by_alias=True)
