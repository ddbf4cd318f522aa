import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret-do-not-use-in-production")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from freight_quotes.main import app
from freight_quotes.models.base import Base
from freight_quotes.models.freight_quote import FreightQuote  # noqa: F401 registers the table
from freight_quotes.core.config import settings
from freight_quotes.core.errors import PersistenceFailure
from freight_quotes.core.security import create_access_token
from freight_quotes.services.quote_store import QuoteStore, get_quote_store


class RecordingStore:
    def __init__(self):
        self.saved = []

    async def save(self, record):
        self.saved.append(record)


class FailingStore:
    def __init__(self):
        self.attempts = 0

    async def save(self, record):
        self.attempts += 1
        raise PersistenceFailure(detail="connection refused")


@pytest.fixture
def recording_store():
    store = RecordingStore()
    app.dependency_overrides[get_quote_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_quote_store, None)


@pytest.fixture
def failing_store():
    store = FailingStore()
    app.dependency_overrides[get_quote_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_quote_store, None)


@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'quotes.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def sqlite_store(session_factory):
    store = QuoteStore(session_factory)
    app.dependency_overrides[get_quote_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_quote_store, None)


@pytest.fixture
async def test_client(recording_store):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def caller_token():
    return create_access_token("user-1", email="client@example.com")


@pytest.fixture
def auth_headers(caller_token):
    return {"Authorization": f"Bearer {caller_token}"}


@pytest.fixture
def valid_quote_data():
    return {
        "sender": {
            "type": "individual",
            "name": "Marie Dupont",
            "phone": "+33 6 12 34 56 78",
            "email": "marie@example.com",
        },
        "pickup": {"address": "12 rue de la Paix", "city": "Paris", "country": "FR"},
        "delivery": {"address": "Quai 4", "city": "Abidjan", "country": "CI"},
        "parcel": {
            "type": "standard",
            "weight_kg": 10,
            "declared_value": 0,
            "options": [],
        },
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "auth: marks tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "persistence: marks tests related to quote storage"
    )
