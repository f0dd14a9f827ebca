"""API test fixtures — FastAPI test client with a fresh shop session registry.

Invariants:
    - Every test gets its own ShopSessionRegistry (no leakage between tests)
    - get_shop_sessions dependency overridden, cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.api.dependencies import build_registry, get_catalog, get_shop_sessions
from storefront.config import get_settings
from storefront.main import app


@pytest.fixture
def registry():
    return build_registry(get_settings(), get_catalog())


@pytest.fixture
async def client(registry):
    """FastAPI test client with the session registry overridden."""
    app.dependency_overrides[get_shop_sessions] = lambda: registry
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def session_id(client):
    res = await client.post("/api/v1/shop-sessions")
    assert res.status_code == 201
    return res.json()["id"]


@pytest.fixture
def complete_fields():
    return {
        "name": "Ada Smith", "email": "ada@example.com", "address": "1 Forge Lane",
        "city": "Sheffield", "zip_code": "S1 2AB", "payment_token": "tok_123",
    }
