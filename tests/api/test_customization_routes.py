"""Customization Routes — tests for building a custom blade over HTTP.

Tests cover:
    - Start on configurable product (201), on a ring (400)
    - advance/retreat cycle, unknown attribute → 400 with state unchanged
    - Length snaps to the grid, non-numeric → 400
    - Explicit option selection by index and reset to defaults
    - submit adds a custom line to the cart and ends the customization
    - abandon, and requests without a customization → 404
"""


def _url(session_id: str, suffix: str = "") -> str:
    return f"/api/v1/shop-sessions/{session_id}/customization{suffix}"


async def _start(client, session_id):
    res = await client.post(_url(session_id), json={"product_id": "custom-blade"})
    assert res.status_code == 201
    return res.json()


async def test_start_customization_defaults(client, session_id):
    body = await _start(client, session_id)
    assert body["selections"]["blade_type"] == "Dagger"
    assert body["indices"]["wood"] == 0
    assert body["length"] == "20.0"
    assert body["display_category"] == "tactical"
    assert body["options"]["blade_type"] == ["Dagger", "Chef", "Hunting", "Tanto", "Bowie"]
    assert body["preview"]["unit_price"] == "180.00"


async def test_start_customization_on_ring_rejected(client, session_id):
    res = await client.post(_url(session_id), json={"product_id": "ring-gold"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "PRODUCT_NOT_CONFIGURABLE"


async def test_advance_wraps_around(client, session_id):
    await _start(client, session_id)
    for _ in range(5):
        res = await client.post(_url(session_id, "/advance"), json={"attribute": "blade_type"})
    assert res.json()["selections"]["blade_type"] == "Dagger"
    res = await client.post(_url(session_id, "/advance"), json={"attribute": "blade_type"})
    assert res.json()["selections"]["blade_type"] == "Chef"
    assert res.json()["display_category"] == "kitchen"


async def test_retreat_wraps_to_last(client, session_id):
    await _start(client, session_id)
    res = await client.post(_url(session_id, "/retreat"), json={"attribute": "wood"})
    assert res.json()["selections"]["wood"] == "Rosewood"


async def test_unknown_attribute_returns_400(client, session_id):
    await _start(client, session_id)
    res = await client.post(_url(session_id, "/advance"), json={"attribute": "color"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "UNKNOWN_ATTRIBUTE"
    current = (await client.get(_url(session_id))).json()
    assert current["indices"] == {"wood": 0, "tang": 0, "blade_type": 0, "steel": 0}


async def test_set_length_snaps(client, session_id):
    await _start(client, session_id)
    res = await client.put(_url(session_id, "/length"), json={"length": 99})
    assert res.json()["length"] == "30.0"
    res = await client.put(_url(session_id, "/length"), json={"length": "17.3"})
    assert res.json()["length"] == "17.5"


async def test_set_length_non_numeric_is_400(client, session_id):
    await _start(client, session_id)
    res = await client.put(_url(session_id, "/length"), json={"length": "long"})
    assert res.status_code == 400


async def test_submit_adds_custom_blade_to_cart(client, session_id):
    await _start(client, session_id)
    await client.post(_url(session_id, "/advance"), json={"attribute": "steel"})
    res = await client.post(_url(session_id, "/submit"))
    assert res.status_code == 200
    body = res.json()
    assert body["customization_active"] is False
    line = body["cart"]["lines"][0]
    assert line["product_id"] == "custom-blade:walnut-full-dagger-carbon-20.0"
    assert line["unit_price"] == "180.00"

    res = await client.get(_url(session_id))
    assert res.status_code == 404


async def test_custom_line_can_be_updated_by_id(client, session_id):
    await _start(client, session_id)
    body = (await client.post(_url(session_id, "/submit"))).json()
    product_id = body["cart"]["lines"][0]["product_id"]
    res = await client.patch(
        f"/api/v1/shop-sessions/{session_id}/cart/items/{product_id}",
        json={"delta": 2},
    )
    assert res.json()["lines"][0]["quantity"] == 3


async def test_abandon_customization(client, session_id):
    await _start(client, session_id)
    res = await client.delete(_url(session_id))
    assert res.status_code == 204
    assert (await client.get(_url(session_id))).status_code == 404
    assert (await client.delete(_url(session_id))).status_code == 404


async def test_advance_without_customization_returns_404(client, session_id):
    res = await client.post(_url(session_id, "/advance"), json={"attribute": "wood"})
    assert res.status_code == 404


async def test_select_option_by_index(client, session_id):
    await _start(client, session_id)
    res = await client.put(_url(session_id, "/selections/blade_type"), json={"index": 3})
    assert res.status_code == 200
    assert res.json()["selections"]["blade_type"] == "Tanto"
    assert res.json()["indices"]["blade_type"] == 3


async def test_select_option_out_of_range_returns_400(client, session_id):
    await _start(client, session_id)
    res = await client.put(_url(session_id, "/selections/steel"), json={"index": 4})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "OPTION_INDEX_OUT_OF_RANGE"
    assert error["context"]["attribute"] == "steel"
    current = (await client.get(_url(session_id))).json()
    assert current["indices"]["steel"] == 0


async def test_select_unknown_attribute_returns_400(client, session_id):
    await _start(client, session_id)
    res = await client.put(_url(session_id, "/selections/handle"), json={"index": 0})
    assert res.json()["error"]["code"] == "UNKNOWN_ATTRIBUTE"


async def test_reset_restores_defaults(client, session_id):
    await _start(client, session_id)
    await client.put(_url(session_id, "/selections/wood"), json={"index": 2})
    await client.put(_url(session_id, "/length"), json={"length": 28})
    res = await client.post(_url(session_id, "/reset"))
    assert res.status_code == 200
    assert res.json()["indices"] == {"wood": 0, "tang": 0, "blade_type": 0, "steel": 0}
    assert res.json()["length"] == "20.0"
