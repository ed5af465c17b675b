"""
Service dependencies for FastAPI routes.

Each request gets its own session, wrapped in a repository and handed to
the service at construction.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.db.database import get_db
from app.api.v1.repositories.crustacean import CrustaceanRepository
from app.api.v1.services.crustacean import CrustaceanService


def get_crustacean_service(session: AsyncSession = Depends(get_db)) -> CrustaceanService:
    """
    Build a CrustaceanService bound to the request's database session.

    Args:
        session (AsyncSession): Database session

    Returns:
        CrustaceanService: Service using a repository over this session
    """
    return CrustaceanService(CrustaceanRepository(session))
