"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to hand out sessions from the test engine
    - Assertions on stored rows use a fresh session, never the request's

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from message_board.db.base import Base
from message_board.infrastructure.database import get_db
from message_board.main import app
from message_board.models.message import Message


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
async def client(test_session_factory):
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


@pytest.fixture
async def drop_messages_table(test_engine):
    """Remove the table so every statement fails with OperationalError."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def stored_messages(test_session_factory):
    """Callable returning all persisted rows, oldest first."""
    async def _load() -> list[Message]:
        async with test_session_factory() as session:
            result = await session.execute(
                select(Message).order_by(Message.timestamp),
            )
            return list(result.scalars().all())
    return _load


@pytest.fixture
def message_count(test_session_factory):
    async def _count() -> int:
        async with test_session_factory() as session:
            result = await session.execute(
                select(func.count()).select_from(Message),
            )
            return result.scalar_one()
    return _count
