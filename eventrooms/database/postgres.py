"""
eventrooms/database/postgres.py

Async SQLAlchemy engine, session factory and transaction helpers.

get_db() yields one AsyncSession per request.  Storage functions are
flush-only; services wrap their writes in unit_of_work() which commits on
success and rolls back on any exception.
"""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from eventrooms.config import settings

logger = structlog.get_logger(__name__)

# Alembic-friendly constraint names.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        raise RuntimeError("Postgres engine not initialised. Call init_postgres() first.")
    return _session_factory


async def init_postgres() -> None:
    """Create the engine and verify connectivity (called on app startup)."""
    global _engine, _session_factory
    _engine = create_async_engine(
        settings.postgres_dsn,
        pool_size=settings.postgres_pool_size,
        pool_pre_ping=True,
        echo=settings.debug,
    )
    _session_factory = async_sessionmaker(
        bind=_engine, expire_on_commit=False, autoflush=False
    )
    async with _engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        if settings.auto_create_tables:
            # Import for side effects: registers mapped classes on Base.metadata.
            import eventrooms.models.sql  # noqa: F401

            await conn.run_sync(Base.metadata.create_all)
            logger.info("postgres_tables_created")


async def close_postgres() -> None:
    """Dispose of the engine (called on app shutdown)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields an AsyncSession."""
    factory = _get_session_factory()
    async with factory() as session:
        yield session


@asynccontextmanager
async def unit_of_work(session: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """Commit everything done inside the block, or roll it all back.

    Usage:
        async with unit_of_work(session):
            await gateway.add(session, record)
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
