"""
Crustacean repository.

Owns every query against the crustaceans table. The session is handed in
at construction so the caller controls its lifetime.
"""

import logging
from typing import Any, Optional

from sqlalchemy import delete as sa_delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import desc, select

from app.api.v1.models.crustacean import Crustacean, utc_now
from app.api.utils.exceptions import DuplicateNameException

logger = logging.getLogger(__name__)

# Signed 64-bit INTEGER range shared by SQLite and Postgres BIGINT
MAX_DB_INTEGER = 2**63 - 1


def _storable_id(crustacean_id: int) -> bool:
    """IDs outside the column range cannot match any row."""
    return 0 < crustacean_id <= MAX_DB_INTEGER


def _is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a unique-constraint failure apart from other integrity errors."""
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate key" in message


class CrustaceanRepository:
    """Data access for crustacean rows."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self, crustacean: Crustacean) -> Crustacean:
        # rollback expires the instance, read the name beforehand
        name = crustacean.name
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if _is_unique_violation(e):
                logger.warning(f"Unique constraint rejected crustacean name: {name}")
                raise DuplicateNameException() from e
            raise
        await self.session.refresh(crustacean)
        return crustacean

    async def create(self, data: dict[str, Any]) -> Crustacean:
        """
        Insert a new crustacean.

        Args:
            data (dict): Column values keyed by attribute name

        Returns:
            Crustacean: Persisted row with id and timestamps

        Raises:
            DuplicateNameException: If the database rejects the name
        """
        crustacean = Crustacean(**data)
        self.session.add(crustacean)
        return await self._commit(crustacean)

    async def find_all(
        self,
        group: Optional[str] = None,
        sub_group: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Crustacean], int]:
        """
        Fetch one page of crustaceans matching the filters.

        The count runs first, then the page. Both share the same predicate
        but no transaction snapshot, so a write landing between them can
        make the total disagree with the page contents.

        Args:
            group (str, optional): Exact group filter
            sub_group (str, optional): Exact sub-group filter
            limit (int): Page size
            offset (int): Rows to skip

        Returns:
            tuple[list[Crustacean], int]: (page rows newest first, total matching rows)
        """
        conditions = []
        if group:
            conditions.append(Crustacean.group == group)
        if sub_group:
            conditions.append(Crustacean.sub_group == sub_group)

        count_statement = select(func.count()).select_from(Crustacean).where(*conditions)
        total_rows = (await self.session.execute(count_statement)).scalar_one()

        # Past the last row the page is empty; also keeps huge offsets out of SQL
        if offset >= total_rows:
            return [], total_rows

        statement = (
            select(Crustacean)
            .where(*conditions)
            .order_by(desc(Crustacean.created_at), desc(Crustacean.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total_rows

    async def find_by_id(self, crustacean_id: int) -> Optional[Crustacean]:
        if not _storable_id(crustacean_id):
            return None
        return await self.session.get(Crustacean, crustacean_id)

    async def find_by_name(self, name: str) -> Optional[Crustacean]:
        statement = select(Crustacean).where(Crustacean.name == name)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, crustacean: Crustacean, changes: dict[str, Any]) -> Crustacean:
        """
        Apply a partial update and bump updated_at.

        An empty change set leaves the row untouched.

        Raises:
            DuplicateNameException: If the database rejects the new name
        """
        if not changes:
            return crustacean

        for field, value in changes.items():
            setattr(crustacean, field, value)
        crustacean.updated_at = utc_now()

        self.session.add(crustacean)
        return await self._commit(crustacean)

    async def delete(self, crustacean_id: int) -> bool:
        """Delete by ID. Returns whether a row was removed."""
        if not _storable_id(crustacean_id):
            return False
        statement = sa_delete(Crustacean).where(Crustacean.id == crustacean_id)
        result = await self.session.execute(statement)
        await self.session.commit()
        return result.rowcount > 0

    async def exists(self, crustacean_id: int) -> bool:
        if not _storable_id(crustacean_id):
            return False
        statement = select(func.count()).select_from(Crustacean).where(Crustacean.id == crustacean_id)
        return (await self.session.execute(statement)).scalar_one() > 0

    async def name_exists(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether another row already uses this name."""
        statement = select(func.count()).select_from(Crustacean).where(Crustacean.name == name)
        if exclude_id is not None and _storable_id(exclude_id):
            statement = statement.where(Crustacean.id != exclude_id)
        return (await self.session.execute(statement)).scalar_one() > 0
