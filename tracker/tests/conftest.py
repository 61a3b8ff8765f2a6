"""
Centralized Test Configuration.
"""

import random

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import init_db
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate
from tracker.app.services.parcel_store import ParcelStore
from tracker.app.services.parcel_service import ParcelService

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """Fresh in-memory database with the parcel table for each test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(test_engine)
    
    yield test_engine
    
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine):
    TestingSessionLocal = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def store(db_session):
    return ParcelStore(db_session)


@pytest.fixture
def service(store):
    return ParcelService(store)


@pytest.fixture(scope="session")
def client_ids():
    """Source of distinct client ids, seeded once per test run."""
    return random.Random(random.SystemRandom().randrange(2**32))


@pytest.fixture
def test_parcel():
    """A registered parcel as a client would submit it."""
    return ParcelCreate(
        client=1000,
        status=ParcelStatus.REGISTERED.value,
        address="test",
        created_at="2024-01-01T00:00:00Z",
    )
