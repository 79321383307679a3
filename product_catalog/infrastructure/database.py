"""Database configuration and session management.

Provides async SQLAlchemy engine, session factory and the unit of work
scope used by catalog operations.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from product_catalog.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory used to open per-operation sessions.

    Returns:
        Application-wide async session factory.
    """
    return async_session_factory


@asynccontextmanager
async def unit_of_work(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run a block as one atomic unit of work.

    Commits when the block exits normally, rolls back and re-raises
    on any exception. Nothing written inside the block is visible to
    other sessions unless the commit succeeds.

    Args:
        session: Session whose transaction scopes the block.

    Yields:
        The same session.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
