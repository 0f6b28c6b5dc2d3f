"""API test fixtures — async DB + FastAPI test client + fresh registry runtime.

Invariants:
    - Every test gets a fresh in-memory SQLite database and a fresh runtime
    - get_db dependency overridden to use the test session factory
    - runtime singleton swapped in and restored after the test

Design Decisions:
    - Lifespan is not run by ASGITransport: fixtures do the wiring it would do
    - max_owned = 2 so capacity scenarios stay short
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import asset_registry.models  # noqa: F401
import asset_registry.services.registry_runtime as runtime_module
from asset_registry.db.base import Base
from asset_registry.infrastructure.database import get_db
from asset_registry.infrastructure.randomness import SeededRandomness
from asset_registry.main import app
from asset_registry.services.registry_runtime import RegistryRuntime


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def registry_runtime():
    original = runtime_module.runtime
    runtime_module.runtime = RegistryRuntime(
        max_owned=2, randomness=SeededRandomness(b"api-tests"),
    )
    yield runtime_module.runtime
    runtime_module.runtime = original


@pytest.fixture
async def client(test_session_factory, registry_runtime):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
