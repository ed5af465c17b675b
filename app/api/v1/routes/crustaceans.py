"""
Crustacean routes.

This module provides CRUD endpoints for crustacean records. Failures are
raised as typed exceptions and turned into responses by the handlers
registered on the application.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from app.api.core.dependencies import get_crustacean_service
from app.api.v1.schemas.crustacean import (
    CreateCrustaceanRequest,
    CrustaceanFilters,
    CrustaceanResponse,
    UpdateCrustaceanRequest,
)
from app.api.v1.schemas.response import (
    ErrorResponseModel,
    PaginatedResponseModel,
    SuccessResponseModel,
)
from app.api.v1.services.crustacean import CrustaceanService
from app.api.utils.exceptions import (
    CrustaceanNotFoundException,
    InvalidIDException,
    ValidationException,
)
from app.api.utils.pagination import PaginationParams, format_paginated_response, validate_pagination_params
from app.api.utils.response import paginated_response, success_response

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/crustaceans",
    tags=["Crustaceans"],
    responses={
        400: {"model": ErrorResponseModel},
        500: {"model": ErrorResponseModel},
    },
)


def parse_crustacean_id(crustacean_id: str) -> int:
    """
    Parse a path ID into an integer.

    Raises:
        InvalidIDException: If the value is not an integer
    """
    try:
        return int(crustacean_id)
    except ValueError:
        raise InvalidIDException() from None


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponseModel[CrustaceanResponse],
    responses={409: {"model": ErrorResponseModel}},
)
async def create_crustacean(
    request: CreateCrustaceanRequest,
    service: CrustaceanService = Depends(get_crustacean_service),
) -> JSONResponse:
    """
    Create a new crustacean.

    The name must not already be used by another crustacean.

    Args:
        request (CreateCrustaceanRequest): Crustacean details
        service (CrustaceanService): Crustacean service

    Returns:
        JSONResponse: Response with the created crustacean
    """
    crustacean = await service.create_crustacean(request)

    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Crustacean created successfully",
        data=CrustaceanResponse.serialize(crustacean),
    )


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=PaginatedResponseModel[CrustaceanResponse],
)
async def list_crustaceans(
    group: Optional[str] = Query(None, description="Filter by group"),
    sub_group: Optional[str] = Query(None, alias="subGroup", description="Filter by sub-group"),
    limit: Optional[int] = Query(None, description="Items per page (default 10, max 100)"),
    page: Optional[int] = Query(None, description="Page number (starting from 1)"),
    service: CrustaceanService = Depends(get_crustacean_service),
) -> JSONResponse:
    """
    List crustaceans, newest first.

    Out-of-range pagination parameters are rejected here even though the
    service would repair them.

    Returns:
        JSONResponse: Paginated response
    """
    params = PaginationParams(limit=limit, page=page)
    errors = validate_pagination_params(params)
    if errors:
        raise ValidationException("Invalid pagination parameters", errors=errors)

    result = await service.list_crustaceans(
        CrustaceanFilters(group=group, sub_group=sub_group, limit=limit, page=page)
    )

    return paginated_response(
        status_code=status.HTTP_200_OK,
        payload=format_paginated_response(
            data=[CrustaceanResponse.serialize(row) for row in result.data],
            total_rows=result.total_rows,
            limit=result.limit,
            page=result.current_page,
            message="Crustaceans retrieved successfully",
        ),
    )


@router.get(
    "/{crustacean_id}",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponseModel[CrustaceanResponse],
    responses={404: {"model": ErrorResponseModel}},
)
async def get_crustacean(
    crustacean_id: str,
    service: CrustaceanService = Depends(get_crustacean_service),
) -> JSONResponse:
    """
    Get a specific crustacean by ID.

    Args:
        crustacean_id (str): Crustacean ID
        service (CrustaceanService): Crustacean service

    Returns:
        JSONResponse: Response with crustacean details
    """
    crustacean = await service.get_crustacean(parse_crustacean_id(crustacean_id))

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Crustacean retrieved successfully",
        data=CrustaceanResponse.serialize(crustacean),
    )


@router.put(
    "/{crustacean_id}",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponseModel[CrustaceanResponse],
    responses={404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def update_crustacean(
    crustacean_id: str,
    request: UpdateCrustaceanRequest,
    service: CrustaceanService = Depends(get_crustacean_service),
) -> JSONResponse:
    """
    Partially update a crustacean. Only supplied fields change.

    Args:
        crustacean_id (str): Crustacean ID
        request (UpdateCrustaceanRequest): Fields to change
        service (CrustaceanService): Crustacean service

    Returns:
        JSONResponse: Response with the updated crustacean
    """
    crustacean = await service.update_crustacean(parse_crustacean_id(crustacean_id), request)

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Crustacean updated successfully",
        data=CrustaceanResponse.serialize(crustacean),
    )


@router.delete(
    "/{crustacean_id}",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponseModel[dict],
    responses={404: {"model": ErrorResponseModel}},
)
async def delete_crustacean(
    crustacean_id: str,
    service: CrustaceanService = Depends(get_crustacean_service),
) -> JSONResponse:
    """
    Delete a crustacean permanently.

    Args:
        crustacean_id (str): Crustacean ID
        service (CrustaceanService): Crustacean service

    Returns:
        JSONResponse: Response with confirmation
    """
    parsed_id = parse_crustacean_id(crustacean_id)
    deleted = await service.delete_crustacean(parsed_id)
    if not deleted:
        raise CrustaceanNotFoundException()

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Crustacean deleted successfully",
        data={"id": parsed_id, "status": "deleted"},
    )
