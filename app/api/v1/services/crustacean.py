"""
Crustacean service layer.

This module provides business logic for crustacean records: name
uniqueness and paginated listing.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.api.v1.models.crustacean import Crustacean
from app.api.v1.repositories.crustacean import CrustaceanRepository
from app.api.v1.schemas.crustacean import (
    CreateCrustaceanRequest,
    CrustaceanFilters,
    UpdateCrustaceanRequest,
)
from app.api.utils.exceptions import CrustaceanNotFoundException, DuplicateNameException
from app.api.utils.pagination import (
    PaginationParams,
    calculate_pagination_info,
    resolve_pagination,
)

logger = logging.getLogger(__name__)


class PaginatedCrustaceanResult(BaseModel):
    """One page of crustaceans plus pagination metadata."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: list[Crustacean]
    total_rows: int
    total_pages: int
    current_page: int
    limit: int
    has_next_page: bool
    has_previous_page: bool


class CrustaceanService:
    """Service class for crustacean management operations."""

    def __init__(self, repository: CrustaceanRepository):
        self.repository = repository

    async def create_crustacean(self, request: CreateCrustaceanRequest) -> Crustacean:
        """
        Create a crustacean after checking its name is free.

        The pre-check only gives a friendlier failure; two concurrent
        creators can both pass it, in which case the database unique
        constraint rejects the second and the repository raises the
        same DuplicateNameException.

        Args:
            request (CreateCrustaceanRequest): Validated creation payload

        Returns:
            Crustacean: Created crustacean

        Raises:
            DuplicateNameException: If the name is already taken
        """
        if await self.repository.find_by_name(request.name):
            logger.warning(f"Create rejected, name already exists: {request.name}")
            raise DuplicateNameException()

        crustacean = await self.repository.create(request.model_dump())
        logger.info(f"Crustacean created: {crustacean.id} ({crustacean.name})")
        return crustacean

    async def list_crustaceans(self, filters: CrustaceanFilters) -> PaginatedCrustaceanResult:
        """
        List crustaceans newest first, filtered and paginated.

        Args:
            filters (CrustaceanFilters): Group filters and raw pagination params

        Returns:
            PaginatedCrustaceanResult: Page rows and metadata computed from
            the resolved limit and page
        """
        pagination = resolve_pagination(PaginationParams(limit=filters.limit, page=filters.page))

        rows, total_rows = await self.repository.find_all(
            group=filters.group,
            sub_group=filters.sub_group,
            limit=pagination.limit,
            offset=pagination.offset,
        )
        info = calculate_pagination_info(total_rows, pagination.limit, pagination.page)

        logger.info(
            f"Retrieved {len(rows)} of {total_rows} crustaceans "
            f"(page {pagination.page}, limit {pagination.limit})"
        )
        return PaginatedCrustaceanResult(
            data=rows,
            total_rows=info.total_rows,
            total_pages=info.total_pages,
            current_page=info.current_page,
            limit=info.limit,
            has_next_page=info.has_next_page,
            has_previous_page=info.has_previous_page,
        )

    async def get_crustacean(self, crustacean_id: int) -> Crustacean:
        """
        Get a crustacean by ID.

        Raises:
            CrustaceanNotFoundException: If no row has this ID
        """
        crustacean = await self.repository.find_by_id(crustacean_id)
        if not crustacean:
            logger.warning(f"Crustacean {crustacean_id} not found")
            raise CrustaceanNotFoundException()
        return crustacean

    async def update_crustacean(
        self,
        crustacean_id: int,
        request: UpdateCrustaceanRequest,
    ) -> Crustacean:
        """
        Apply a partial update.

        The name is only re-checked when it is supplied and differs from
        the current one, so resubmitting the unchanged name succeeds.

        Args:
            crustacean_id (int): Crustacean ID
            request (UpdateCrustaceanRequest): Fields to change

        Returns:
            Crustacean: Updated crustacean

        Raises:
            CrustaceanNotFoundException: If no row has this ID
            DuplicateNameException: If the new name belongs to another row
        """
        crustacean = await self.get_crustacean(crustacean_id)
        changes = request.changes()

        new_name = changes.get("name")
        if new_name and new_name != crustacean.name:
            if await self.repository.name_exists(new_name, exclude_id=crustacean_id):
                logger.warning(f"Update of {crustacean_id} rejected, name already exists: {new_name}")
                raise DuplicateNameException()

        crustacean = await self.repository.update(crustacean, changes)
        logger.info(f"Crustacean updated: {crustacean_id} fields={sorted(changes)}")
        return crustacean

    async def delete_crustacean(self, crustacean_id: int) -> bool:
        """
        Delete a crustacean.

        Returns:
            bool: False when the ID does not exist, True once deleted
        """
        if not await self.repository.exists(crustacean_id):
            logger.info(f"Delete skipped, crustacean {crustacean_id} does not exist")
            return False

        deleted = await self.repository.delete(crustacean_id)
        logger.info(f"Crustacean deleted: {crustacean_id}")
        return deleted

    async def validate_name_uniqueness(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Return True when no other crustacean uses this name."""
        return not await self.repository.name_exists(name, exclude_id)
