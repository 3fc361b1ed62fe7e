"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from orders_api.dependencies import reset_dependencies
from orders_api.main import app
from orders_core.data.models.base import Base


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create test session factory."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    yield session_factory


@pytest.fixture
def test_client(monkeypatch) -> Generator[TestClient, None, None]:
    """FastAPI test client over fresh in-memory repositories."""
    monkeypatch.setenv("APP_PERSISTENCE", "memory")
    monkeypatch.setenv("PRICING_STRATEGY", "standard")
    reset_dependencies()

    with TestClient(app) as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
    reset_dependencies()


@pytest.fixture
def customer_id(test_client: TestClient) -> str:
    """Register a customer through the API and return its id."""
    response = test_client.post(
        "/customers", json={"name": "Ada Lovelace", "email": "ada@example.com"}
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]
