"""Service test fixtures — async in-memory DB, store, and service factory.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - make_service hands out a new extrinsic position per call unless one is given
    - read_state uses a fresh session: it only ever sees committed rows

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for registry rules
    - MAX_OWNED = 2 keeps capacity scenarios short
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import asset_registry.models  # noqa: F401
from asset_registry.core.asset import Asset
from asset_registry.db.base import Base
from asset_registry.infrastructure.block_context import BlockContext
from asset_registry.infrastructure.clock import BlockClock
from asset_registry.infrastructure.event_log import EventLog
from asset_registry.infrastructure.randomness import SeededRandomness
from asset_registry.models.asset import AssetRecord
from asset_registry.models.counter import RegistryCounter
from asset_registry.models.owner_index import OwnerIndexEntry
from asset_registry.services.registry_service import RegistryService
from asset_registry.services.registry_store import SqlRegistryStore


MAX_OWNED = 2


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
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store(test_db):
    return SqlRegistryStore(test_db, MAX_OWNED)


@pytest.fixture
def chain():
    return BlockContext()


@pytest.fixture
def events():
    return EventLog()


@pytest.fixture
def make_service(test_db, chain, events):
    """Factory: RegistryService bound to one extrinsic position."""
    randomness = SeededRandomness(b"registry-tests")

    def _make(position=None, max_owned: int = MAX_OWNED) -> RegistryService:
        position = position or chain.begin_extrinsic()
        return RegistryService(
            store=SqlRegistryStore(test_db, max_owned),
            context=position,
            randomness=randomness,
            clock=BlockClock(position, genesis_timestamp_ms=1_000, block_time_ms=6_000),
            events=events,
        )

    return _make


@pytest.fixture
def read_state(test_session_factory):
    """Committed state as plain tuples — equal snapshots mean byte-identical stores."""

    async def _read() -> dict:
        async with test_session_factory() as db:
            assets = (await db.execute(
                select(AssetRecord).order_by(AssetRecord.identity),
            )).scalars().all()
            owners = (await db.execute(
                select(OwnerIndexEntry).order_by(OwnerIndexEntry.account),
            )).scalars().all()
            counters = (await db.execute(select(RegistryCounter))).scalars().all()
            decoded = [Asset.decode(a.record) for a in assets]
            return {
                "assets": [
                    (a.identity, a.price, a.attribute.value, a.owner, a.created_at)
                    for a in decoded
                ],
                "owner_index": {o.account: list(o.identities) for o in owners},
                "counters": {c.name: c.value for c in counters},
            }

    return _read
