"""API test fixtures - FastAPI test client over a fresh seeded store.

Invariants:
    - Every test gets its own ProductStore (products 1, 2, 3)
    - get_product_store dependency overridden; lifespan never runs

Design Decisions:
    - httpx ASGITransport: in-process, no server socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from product_api.api.routes.product import get_product_store
from product_api.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_product_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
