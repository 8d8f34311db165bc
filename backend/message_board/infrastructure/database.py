"""Database Session Manager: async connection pool with per-request scoped sessions.

Invariants:
    - A session's connection is checked out before the handler runs;
      failure to connect raises StorageConnectError and no handler runs
    - Every session rolls back on exception (no partial commits leak)
    - Every session is closed (connection returned to the pool) on every exit path,
      including cancellation when a client disconnects
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - Pool sizing and asyncpg command_timeout only applied to PostgreSQL URLs;
      SQLite engines keep SQLAlchemy's default pool
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import SQLAlchemyError

from message_board.core.errors import StorageConnectError

logger = logging.getLogger(__name__)


def engine_options(
    database_url: str,
    pool_size: int = 10,
    max_overflow: int = 10,
    pool_timeout: float = 30.0,
    command_timeout: float | None = 30.0,
) -> dict[str, Any]:
    """create_async_engine keyword arguments for the given URL."""
    options: dict[str, Any] = {"pool_pre_ping": True}
    if database_url.startswith("postgresql"):
        options.update(
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=3600,
        )
        if command_timeout and database_url.startswith("postgresql+asyncpg"):
            options["connect_args"] = {"command_timeout": command_timeout}
    return options


class DatabaseSessionManager:
    """Owns the engine and hands out connected sessions, one per request."""

    def __init__(self, database_url: str, **kwargs):
        self.engine = create_async_engine(
            database_url, **engine_options(database_url, **kwargs),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a connected session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            await session.connection()
        except (SQLAlchemyError, OSError) as e:
            await session.close()
            logger.error(
                f"Error connecting to database: {e}",
                extra={"error_code": "STORAGE_CONNECT_FAILURE"},
            )
            raise StorageConnectError() from e
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one pooled, connected session per request."""
    if not db_manager:
        logger.critical(
            "Database not initialized",
            extra={"error_code": "STORAGE_CONNECT_FAILURE", "operation": "connect"},
        )
        raise StorageConnectError()
    async with db_manager.session() as session:
        yield session
