"""Service test fixtures — async DB, session manager and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - app.state.services rebuilt on the test session manager, restored afterwards
    - db_module.db_manager patched so readiness probes see the test database

Design Decisions:
    - SQLite in-memory with StaticPool: every short-lived repository session shares
      the one connection, so data written by save() is visible to find_by_id()
    - DatabaseSessionManager built via __new__: reuses the real session() error
      mapping without creating a second engine
"""

from contextlib import asynccontextmanager

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock

from storefront.core.domain_types import EntityKind
from storefront.db.base import Base
from storefront.infrastructure.database import DatabaseSessionManager
from storefront.services.crud_service import CrudService
from storefront.services.registry import build_services
import storefront.infrastructure.database as db_module
import storefront.models  # noqa: F401
from storefront.main import app


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
def session_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture
async def test_db(session_manager):
    async with session_manager.session() as session:
        yield session


@asynccontextmanager
async def _client_with(services, manager):
    original_services = getattr(app.state, "services", None)
    original_manager = db_module.db_manager
    app.state.services = services
    db_module.db_manager = manager
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    finally:
        app.state.services = original_services
        db_module.db_manager = original_manager


@pytest.fixture
async def client(session_manager):
    """FastAPI test client wired to real services over the test DB."""
    async with _client_with(build_services(session_manager), session_manager) as c:
        yield c


@pytest.fixture
def mock_services():
    """One AsyncMock CrudService per entity kind, for controller-only tests."""
    return {kind: AsyncMock(spec=CrudService) for kind in EntityKind}


@pytest.fixture
async def mock_client(mock_services, session_manager):
    """FastAPI test client whose services are the mock_services doubles."""
    async with _client_with(mock_services, session_manager) as c:
        yield c
