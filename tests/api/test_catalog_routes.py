"""Catalog Routes — tests for product listing, lookup and render descriptors.

Tests cover:
    - GET /catalog/products lists all products in order, filterable by kind
    - Unknown product → 404 PRODUCT_NOT_FOUND envelope
    - Render descriptor carries model reference and material presets
    - Health probe
    - Nothing but the API is mounted on the app
"""

from starlette.routing import Mount

from storefront.main import app


async def test_health_check(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_list_products(client):
    res = await client.get("/api/v1/catalog/products")
    assert res.status_code == 200
    products = res.json()["products"]
    assert len(products) == 7
    assert products[0]["id"] == "ring-silver"
    assert products[0]["unit_price"] == "50.00"
    assert products[0]["price_display"] == "$50.00"


async def test_list_products_by_kind(client):
    res = await client.get("/api/v1/catalog/products", params={"kind": "blade"})
    assert [p["id"] for p in res.json()["products"]] == ["custom-blade"]


async def test_list_products_invalid_kind_is_400(client):
    res = await client.get("/api/v1/catalog/products", params={"kind": "spoon"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert res.json()["error"]["details"][0]["field"] == "kind"


async def test_get_product(client):
    res = await client.get("/api/v1/catalog/products/ring-platinum")
    assert res.status_code == 200
    assert res.json()["name"] == "Platinum Ring"


async def test_get_unknown_product_returns_404(client):
    res = await client.get("/api/v1/catalog/products/ring-nope")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "PRODUCT_NOT_FOUND"
    assert error["context"]["product_id"] == "ring-nope"


async def test_render_descriptor(client):
    res = await client.get("/api/v1/catalog/products/ring-copper/render")
    assert res.status_code == 200
    body = res.json()
    assert body["color_or_material"] == "#b87333"
    assert body["model_reference"].endswith(".stl")
    assert body["material"]["metalness"] == 0.8
    assert body["rotation_speed_rad_per_sec"] == 0.5


async def test_only_api_routes_are_served(client):
    assert not any(isinstance(route, Mount) for route in app.routes)
    res = await client.get("/")
    assert res.status_code == 404
