import os
import tempfile
from collections.abc import AsyncGenerator

# Settings are read at import time, so the environment is set first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_DATABASE", "false")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "crustaceans-test-logs"))

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

from app.api.db.database import get_db  # noqa: E402
from app.api.v1.repositories.crustacean import CrustaceanRepository  # noqa: E402
from app.api.v1.schemas.crustacean import CreateCrustaceanRequest  # noqa: E402
from app.api.v1.services.crustacean import CrustaceanService  # noqa: E402
from main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create an in-memory database shared by every connection of one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session: AsyncSession) -> CrustaceanRepository:
    return CrustaceanRepository(db_session)


@pytest.fixture
def service(repository: CrustaceanRepository) -> CrustaceanService:
    return CrustaceanService(repository)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with get_db pointed at the test database.

    Unhandled errors come back as 500 responses instead of propagating.
    """

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_create_request(name: str = "American Lobster", **overrides) -> CreateCrustaceanRequest:
    """Build a valid creation request, overriding any field."""
    fields = {
        "name": name,
        "sub_group": "Lobster",
        "description": "Large marine crustacean with large claws",
        "habitat": "North Atlantic Ocean",
        "average_size": 25,
        "scientific_name": "Homarus americanus",
    }
    fields.update(overrides)
    return CreateCrustaceanRequest(**fields)


def make_payload(name: str = "American Lobster", **overrides) -> dict:
    """Build a valid camelCase JSON body for POST requests."""
    payload = {
        "name": name,
        "subGroup": "Lobster",
        "description": "Large marine crustacean with large claws",
        "habitat": "North Atlantic Ocean",
        "averageSize": 25,
        "scientificName": "Homarus americanus",
    }
    payload.update(overrides)
    return payload
