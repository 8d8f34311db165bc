"""Database Session Manager: engine options and session scoping."""

from sqlalchemy import text

import pytest

from message_board.infrastructure.database import (
    DatabaseSessionManager, engine_options,
)


def test_postgres_options_include_pool_and_command_timeout():
    options = engine_options(
        "postgresql+asyncpg://u@h/db",
        pool_size=5, max_overflow=2, pool_timeout=3.0, command_timeout=4.0,
    )
    assert options["pool_size"] == 5
    assert options["max_overflow"] == 2
    assert options["pool_timeout"] == 3.0
    assert options["pool_pre_ping"] is True
    assert options["connect_args"] == {"command_timeout": 4.0}


def test_postgres_command_timeout_can_be_disabled():
    options = engine_options("postgresql+asyncpg://u@h/db", command_timeout=None)
    assert "connect_args" not in options


def test_sqlite_options_skip_pool_sizing():
    options = engine_options("sqlite+aiosqlite:///:memory:", pool_size=5)
    assert options == {"pool_pre_ping": True}


@pytest.fixture
async def manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'board.db'}")
    yield manager
    await manager.dispose()


async def test_session_is_connected_on_entry(manager):
    async with manager.session() as session:
        assert session.in_transaction()
        result = await session.execute(text("SELECT 1"))
        assert result.scalar_one() == 1


async def test_session_rolls_back_and_reraises(manager):
    async with manager.session() as session:
        await session.execute(text("CREATE TABLE t (x INTEGER)"))
        await session.commit()

    with pytest.raises(ValueError):
        async with manager.session() as session:
            await session.execute(text("INSERT INTO t VALUES (1)"))
            raise ValueError("abort")

    async with manager.session() as session:
        count = (await session.execute(text("SELECT count(*) FROM t"))).scalar_one()
    assert count == 0
