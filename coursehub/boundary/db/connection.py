"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, coursehub.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from coursehub.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Shared async engine of the course database, created once per process.

    PostgreSQL engines get a sized pool with pre-ping so stale connections
    are replaced before use; other dialects keep their default pool.

    Returns:
        AsyncEngine: Engine built from DatabaseSettings
    """
    db_config = get_settings().database
    return create_async_engine(db_config.async_database_url, **db_config.engine_options())


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to the shared engine with
    autoflush=False and expire_on_commit=False so that services control
    transactions explicitly and can read attributes after commit.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur. Uncommitted work is
    rolled back on close.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @app.get("/courses/{id}")
        async def get_course(id: UUID, db: AsyncSession = Depends(get_async_db)):
            return await course_crud.get_by_id(db, id)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose the pooled connections of the shared engine."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
