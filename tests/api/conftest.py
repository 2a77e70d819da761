"""API test fixtures — fresh store + FastAPI test client per test.

Invariants:
    - Every test gets its own CommerceStore (no state shared between tests)
    - The store fixture is the same instance the app serves, so tests can
      assert on store state directly after a request

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real routing and
      error handlers without a network socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.config import Settings
from storefront.core.store import CommerceStore
from storefront.main import create_app


@pytest.fixture
def store():
    return CommerceStore()


@pytest.fixture
def app(store):
    return create_app(store=store, settings=Settings(log_format="text"))


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def seeded(store):
    """Product 1 (price 100) with variant 1 (stock 10), customer 1."""
    product = store.create_product("Tee", 100, "Cotton tee")
    variant = store.create_variant(product.id, "red", "M", 10)
    customer = store.add_customer("Ada", "ada@example.com")
    return product, variant, customer
