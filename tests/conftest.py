"""Pytest configuration and shared fixtures.

Organization:
    - Database Fixtures: in-memory SQLite engine, session factory and session
    - Application Fixtures: FastAPI app wired to the test database, HTTP client
    - Data Fixtures: product factory

Every test gets a fresh in-memory database; nothing touches PostgreSQL.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from catalog_service.core.models import Product

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DB_ENABLED", "false")
os.environ.setdefault("DB_CREATE_SCHEMA", "false")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_FILE_ENABLED", "false")


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create async SQLAlchemy engine with in-memory SQLite.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    from catalog_service.core.database import Base
    from catalog_service.core.models import Product  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory configured like the application's."""
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Provide a session against the test database.

    Example:
        async def test_create(db_session):
            db_session.add(Product(name="Kettle", price=Decimal("20.00")))
            await db_session.commit()
    """
    async with session_factory() as session:
        yield session


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession]) -> FastAPI:
    """Create FastAPI application wired to the test database.

    The lifespan is not run by ASGITransport, so no connection to the
    configured database is attempted.
    """
    from catalog_service.app.main import create_app
    from catalog_service.core.dependencies import get_db_session

    application = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing.

    Example:
        async def test_health_check(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def make_product(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[Product]]:
    """Factory persisting a product in its own committed transaction.

    Example:
        product = await make_product("Kettle", created_at=datetime(2025, 1, 1, tzinfo=UTC))
    """
    from catalog_service.core.models import Product

    async def _make(
        name: str = "Sample product",
        *,
        price: Decimal | str = "19.99",
        stock: int = 5,
        created_at: datetime | None = None,
        **fields: Any,
    ) -> Product:
        values: dict[str, Any] = {"name": name, "price": Decimal(price), "stock": stock, **fields}
        if created_at is not None:
            values["created_at"] = created_at
            values.setdefault("updated_at", created_at)
        product = Product(**values)
        async with session_factory() as session:
            session.add(product)
            await session.commit()
        return product

    return _make


@pytest.fixture
def base_time() -> datetime:
    """Fixed reference timestamp for ordering tests."""
    return datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)
