"""Infrastructure test fixtures — async in-memory SQLite database.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager wraps the test engine, so repositories run the real
      session/rollback/error-mapping path

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PostgreSQL-specific
      features are not used by the booking schema
    - DatabaseSessionManager built via __new__: reuses the test engine instead
      of opening a second connection pool
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import hotel_booking.models  # noqa: F401
from hotel_booking.db.base import Base
from hotel_booking.infrastructure.database import DatabaseSessionManager
from hotel_booking.infrastructure.sql_repositories import (
    SqlBookingRepository, SqlRoomRepository,
)


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
def db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def room_repo(db_manager):
    return SqlRoomRepository(db_manager)


@pytest.fixture
def booking_repo(db_manager):
    return SqlBookingRepository(db_manager)
