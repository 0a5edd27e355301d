"""
Pytest configuration and fixtures.
Provides test app client, async DB session replacement and a fake
payment provider.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("STRIPE_SECRET_KEY", "")

import pytest
from dependency_injector import providers
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.deps.di_container import get_container


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakePaymentProvider:
    """Stands in for the Stripe client; records every intent request."""

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.requests = []

    async def create_payment_intent(self, amount, metadata=None):
        self.requests.append({"amount": amount, "metadata": metadata or {}})
        return {
            "id": f"pi_test_{len(self.requests)}",
            "client_secret": f"pi_test_{len(self.requests)}_secret",
            "amount": amount,
            "currency": "usd",
        }

    async def close(self) -> None:
        pass


@pytest.fixture(scope="function")
async def test_session_maker():
    """
    Create a test database.
    Uses in-memory SQLite for fast tests.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """A session on the test database, for service-level tests."""
    async with test_session_maker() as session:
        yield session


@pytest.fixture(autouse=True)
def clear_app_cache():
    """The cache is application scoped; start every test empty."""
    cache = get_container().app_cache()
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def payment_provider():
    """Install a configured fake payment provider in the container."""
    fake = FakePaymentProvider()
    container = get_container()
    with container.payment_provider.override(providers.Object(fake)):
        yield fake


@pytest.fixture(scope="function")
async def test_client(test_session_maker):
    """
    Create a test HTTP client bound to the test database.
    """

    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_db, None)
