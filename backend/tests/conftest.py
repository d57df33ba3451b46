"""Shared test configuration and fixtures.

Each test runs against its own SQLite database file, created from the model
metadata and thrown away afterwards. Requests made through ``client`` get a
fresh session per request, committed or rolled back exactly like in
production.
"""

import os
import uuid
from collections.abc import AsyncGenerator

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from accommodation_service.database import Base, get_db
from accommodation_service.main import app
from accommodation_service.models import Accommodation, Amenity  # noqa: F401  (register tables)

# ---------------------------------------------------------------------------
# Per-test database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine on a throwaway SQLite file with all tables in place."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for calling the service layer directly."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the per-test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: caller identities
# ---------------------------------------------------------------------------


@pytest.fixture
def host_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def host_headers(host_id: uuid.UUID) -> dict[str, str]:
    """Identity headers for the host owning ``test_accommodation``."""
    return {"X-User-Id": str(host_id), "X-User-Role": "HOST"}


@pytest.fixture
def other_host_headers() -> dict[str, str]:
    """Identity headers for a host who owns nothing."""
    return {"X-User-Id": str(uuid.uuid4()), "X-User-Role": "HOST"}


@pytest.fixture
def guest_headers() -> dict[str, str]:
    return {"X-User-Id": str(uuid.uuid4()), "X-User-Role": "GUEST"}


# ---------------------------------------------------------------------------
# Convenience fixtures: accommodation helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def accommodation_payload() -> dict:
    return {
        "name": "Test Villa",
        "address": "Jl. Pantai Berawa 12, Canggu",
        "min_guests": 1,
        "max_guests": 4,
        "pricing_mode": "PER_GUEST",
        "approval_mode": "MANUAL",
        "amenities": ["WIFI", "PARKING"],
    }


@pytest_asyncio.fixture
async def test_accommodation(client: AsyncClient, host_headers: dict, accommodation_payload: dict) -> dict:
    """Create and return a test accommodation via the API."""
    response = await client.post("/api/accommodation", json=accommodation_payload, headers=host_headers)
    assert response.status_code == 201, f"Failed to create test accommodation: {response.text}"
    return response.json()
