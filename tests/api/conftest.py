"""Route test fixtures — in-memory MongoDB + FastAPI test client.

Invariants:
    - Every test gets a fresh mongomock collection
    - get_customer_store dependency overridden to use the test store
    - Store clock is controllable so createdAt changes are observable

Design Decisions:
    - mongomock-motor: no MongoDB server needed, same motor call surface
    - Lifespan not run by ASGITransport: no real client is ever created
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from customer_api.api.dependencies import get_customer_store
from customer_api.config import get_settings
from customer_api.infrastructure.customer_store import MongoCustomerStore
from customer_api.main import app


class FakeClock:
    """Returns a fixed instant; advance() moves it forward."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> datetime:
        self.now = self.now + timedelta(**delta)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def collection():
    return AsyncMongoMockClient()["customer_api_test"]["customer"]


@pytest.fixture
def store(collection, clock):
    return MongoCustomerStore(collection, clock=clock)


@pytest.fixture
def api_key():
    return get_settings().api_key


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_customer_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def create_customer(client):
    """POST a customer and return its id."""
    async def _create(name: str) -> str:
        res = await client.post("/customer", json={"name": name})
        assert res.status_code == 200
        return res.json()

    return _create
