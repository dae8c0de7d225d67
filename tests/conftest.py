"""Pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator


# Settings are read at import time; keep hashing fast and the secret fixed
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from kangaroute.core.database import Base, get_db
from kangaroute.main import create_app

# Import all models to ensure they're registered with Base.metadata
from kangaroute.modules.companies.models import Company
from kangaroute.modules.slots.models import Slot
from kangaroute.modules.vehicles.models import Vehicle
from tests.helpers import bearer_for, make_company


# In-memory database; StaticPool keeps its single connection alive
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture(scope="function")
async def engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session for arranging and inspecting test data.

    Fixtures commit what they create so the API, which opens its own
    session per request, can see it.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
async def app(session_factory):
    """Create test application instance."""
    application = create_app()

    # Same commit/rollback contract as the real get_db
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Company Fixtures
# ============================================================


@pytest.fixture
async def company(db: AsyncSession) -> Company:
    """Create a test company.

    Returns:
        A persisted, active Company
    """
    return await make_company(db)


@pytest.fixture
async def other_company(db: AsyncSession) -> Company:
    """A second tenant, for isolation tests."""
    return await make_company(db)


@pytest.fixture
def auth_headers(company: Company) -> dict[str, str]:
    """Generate authorization headers with a valid token for ``company``."""
    return bearer_for(company)


@pytest.fixture
async def authenticated_client(
    app, auth_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client authenticated as ``company``.

    Args:
        app: The FastAPI application
        auth_headers: Authorization headers with a valid token

    Yields:
        AsyncClient with authentication headers
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=auth_headers,
    ) as client:
        yield client


# ============================================================
# Fleet Fixtures
# ============================================================


@pytest.fixture
async def vehicle(db: AsyncSession, company: Company) -> Vehicle:
    """An active vehicle owned by ``company``."""
    vehicle = Vehicle(license_plate="1234-ABC", name="Big Van", company_id=company.id)
    db.add(vehicle)
    await db.commit()
    await db.refresh(vehicle)
    return vehicle


@pytest.fixture
async def slot(db: AsyncSession, vehicle: Vehicle) -> Slot:
    """A 60 x 50 x 80 cm slot inside ``vehicle``."""
    slot = Slot(
        name="A1",
        height=60,
        width=50,
        depth=80,
        is_active=True,
        vehicle_id=vehicle.id,
    )
    db.add(slot)
    await db.commit()
    await db.refresh(slot)
    return slot
