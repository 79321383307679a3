"""Shared fixtures for catalog tests.

Service and API tests run against an in-memory SQLite database that
lives for a single test.
"""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from product_catalog.catalog.service import ProductService
from product_catalog.infrastructure.database import Base
from product_catalog.main import app  # noqa: F401  registers all models


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the catalog schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the test database."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def service(session_factory: async_sessionmaker[AsyncSession]) -> ProductService:
    """Create product service backed by the test database."""
    return ProductService(session_factory)


@pytest.fixture
def lamp_data() -> dict:
    """Sample product with two images."""
    return {
        "title": "Lamp",
        "slug": "lamp",
        "price": 49.5,
        "description": "Desk lamp",
        "stock": 3,
        "sizes": [],
        "tags": ["Lighting"],
        "images": ["a.jpg", "b.jpg"],
    }
