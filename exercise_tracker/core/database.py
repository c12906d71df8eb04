"""
Database configuration and session management.

Provides SQLAlchemy async engine setup, session factory and session
lifecycles. Repositories never reach for a global connection: callers
open a session here and inject it into the repository constructor.
"""

import logging
import os
from typing import AsyncGenerator, Optional

from sqlalchemy import event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from exercise_tracker.core.config import settings
from exercise_tracker.models.base import Base

logger = logging.getLogger(__name__)


def _is_memory_database(url: URL) -> bool:
    database = url.database or ""
    return database in {"", ":memory:"} or url.query.get("mode") == "memory"


def get_async_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    For SQLite:
    - In-memory databases use StaticPool so every session sees the same
      database; file databases keep the default pool, one connection per
      session
    - Enables check_same_thread=False for async compatibility
    - Turns on foreign key enforcement for every connection

    Args:
        database_url: Connection URL, defaults to settings.database_url
        echo: Log SQL statements, defaults to settings.database_echo

    Returns:
        Configured AsyncEngine instance
    """
    url = make_url(database_url or settings.database_url)
    is_sqlite = url.get_backend_name() == "sqlite"

    engine_kwargs = {
        "echo": settings.database_echo if echo is None else echo,
        "connect_args": {"check_same_thread": False} if is_sqlite else {},
    }

    if is_sqlite and _is_memory_database(url):
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **engine_kwargs)

    # Foreign keys are off by default in SQLite
    if is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def get_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build a session factory for an engine.

    Args:
        bind: Engine the sessions connect through

    Returns:
        async_sessionmaker producing AsyncSession instances
    """
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,
    )


# Created once at import; connections are opened lazily on first use
engine = get_async_engine()

async_session_maker = get_session_maker(engine)


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Create all tables.

    Schema migration is out of scope for this package; create_all only
    runs when ENABLE_DB_CREATE_ALL is set (or a bind is passed explicitly,
    as tests and local scripts do).

    Args:
        bind: Engine to create tables on, defaults to the module engine
    """
    # Import models so metadata is populated before create_all()
    from exercise_tracker import models  # noqa: F401

    explicit = bind is not None
    target = bind or engine

    if not explicit and os.getenv("ENABLE_DB_CREATE_ALL", "").lower() not in {"1", "true", "yes"}:
        logger.info("Skipping create_all; set ENABLE_DB_CREATE_ALL=1 to enable")
        return

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables created")


async def close_db() -> None:
    """
    Close the database connection pool.

    Should be called at application shutdown.
    """
    await engine.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a session that commits on success and rolls back on error.

    Yields:
        AsyncSession instance for database operations

    Example:
        async for session in get_db():
            repo = ExerciseRepository(session)
            await repo.create_exercise(dto)
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Alternative session generator with manual commit control.

    Useful for scripts and background tasks.

    Note:
        Caller must explicitly commit or rollback
    """
    async with async_session_maker() as session:
        yield session


class DatabaseHealthCheck:
    """Database connectivity checks."""

    @staticmethod
    async def check_connection(bind: Optional[AsyncEngine] = None) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if database is reachable, False otherwise
        """
        try:
            async with (bind or engine).connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database health check failed", exc_info=True)
            return False

    @staticmethod
    async def get_database_info() -> dict:
        """
        Get database information for monitoring.

        Returns:
            Dictionary with database metadata (credentials stripped)
        """
        return {
            "url": engine.url.render_as_string(hide_password=True),
            "dialect": engine.dialect.name,
            "async": True,
        }
