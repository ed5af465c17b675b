import logging
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import func
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel, select

from app.api.v1.models.crustacean import Crustacean
from config import settings

logger = logging.getLogger(__name__)

SEED_CRUSTACEANS = [
    {
        "name": "American Lobster",
        "sub_group": "Lobster",
        "description": "Large marine crustacean with large claws",
        "habitat": "North Atlantic Ocean",
        "average_size": 25,
        "scientific_name": "Homarus americanus",
    },
    {
        "name": "Giant Tiger Prawn",
        "sub_group": "Prawn",
        "description": "Large commercial prawn species",
        "habitat": "Indo-Pacific waters",
        "average_size": 15,
        "scientific_name": "Penaeus monodon",
    },
    {
        "name": "White Shrimp",
        "sub_group": "Shrimp",
        "description": "Common commercial shrimp species",
        "habitat": "Atlantic and Gulf coasts",
        "average_size": 8,
        "scientific_name": "Litopenaeus setiferus",
    },
]


def to_async_url(url: str) -> str:
    """Rewrite plain driver URLs to their async drivers."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return url


def build_engine(url: str) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    SQLite files get their parent directory created; pool sizing only
    applies to server databases.

    Args:
        url (str): SQLAlchemy database URL

    Returns:
        AsyncEngine: Configured engine
    """
    db_url = make_url(to_async_url(url))

    if db_url.get_backend_name() == "sqlite":
        if db_url.database and db_url.database != ":memory:":
            Path(db_url.database).parent.mkdir(parents=True, exist_ok=True)
        return create_async_engine(db_url, echo=settings.DEBUG)

    return create_async_engine(
        db_url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )


engine = build_engine(settings.DATABASE_URL)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides database session.

    Yields:
        AsyncSession: Database session
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def seed_db(session: AsyncSession) -> int:
    """
    Insert the sample crustaceans when the table is empty.

    Args:
        session (AsyncSession): Database session

    Returns:
        int: Number of rows inserted
    """
    result = await session.execute(select(func.count()).select_from(Crustacean))
    if result.scalar_one() > 0:
        return 0

    session.add_all(Crustacean(**row) for row in SEED_CRUSTACEANS)
    await session.commit()
    logger.info(f"Database seeded with {len(SEED_CRUSTACEANS)} crustaceans")
    return len(SEED_CRUSTACEANS)


async def init_db(db_engine: AsyncEngine = engine, seed: bool = settings.SEED_DATABASE):
    """Initialize database tables and optionally seed sample data."""
    async with db_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Crustaceans table ready")

    if seed:
        session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
        async with session_factory() as session:
            await seed_db(session)
