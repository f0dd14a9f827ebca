"""Pricing Engine — tests for pure totals and the single rounding rule.

Tests cover:
    - line_total, cart_total, item_count on small carts
    - Two-ring scenario: total 40, item count 3
    - Totals recomputed after every mutation (no drift)
    - ROUND_HALF_UP to cents, applied uniformly in price_summary
"""

from decimal import Decimal

from storefront.core.cart_store import CartLine, CartStore
from storefront.core.catalog import Product
from storefront.core.domain_types import ProductId
from storefront.core.pricing import (
    cart_total,
    format_money,
    item_count,
    line_total,
    price_summary,
    round_money,
)


def _make_product(pid: str, price: str) -> Product:
    return Product(
        id=ProductId(pid), name=pid, unit_price=Decimal(price),
        color_or_material="gold", description="", model_reference="ring.stl",
    )


def test_line_total_multiplies_price_by_quantity():
    line = CartLine(ProductId("a"), "A", Decimal("12.50"), 3)
    assert line_total(line) == Decimal("37.50")


def test_empty_cart_totals_are_zero():
    snapshot = CartStore().snapshot()
    assert cart_total(snapshot) == Decimal(0)
    assert item_count(snapshot) == 0


def test_two_rings_scenario():
    cart = CartStore()
    ring_a = _make_product("RingA", "10")
    cart.add_one(ring_a)
    cart.add_one(ring_a)
    cart.add_one(_make_product("RingB", "20"))
    snapshot = cart.snapshot()
    assert snapshot.get("RingA").quantity == 2
    assert snapshot.get("RingA").unit_price == Decimal("10")
    assert len(snapshot) == 2
    assert cart_total(snapshot) == Decimal("40")
    assert item_count(snapshot) == 3


def test_single_line_removed_gives_zero_total():
    cart = CartStore()
    cart.add_one(_make_product("RingA", "10"))
    cart.update_quantity("RingA", -5)
    snapshot = cart.snapshot()
    assert snapshot.is_empty
    assert cart_total(snapshot) == Decimal(0)


def test_cart_total_tracks_every_mutation():
    cart = CartStore()
    a, b = _make_product("a", "19.99"), _make_product("b", "5.01")
    steps = [
        lambda: cart.add_one(a),
        lambda: cart.add_one(b),
        lambda: cart.update_quantity("a", 4),
        lambda: cart.update_quantity("b", -1),
        lambda: cart.add_one(b),
        lambda: cart.remove_all("a"),
    ]
    for step in steps:
        step()
        snapshot = cart.snapshot()
        assert cart_total(snapshot) == sum(
            (line_total(line) for line in snapshot), Decimal(0),
        )
        assert cart_total(snapshot) == cart_total(cart.snapshot())


def test_round_money_rounds_half_up():
    assert round_money(Decimal("2.345")) == Decimal("2.35")
    assert round_money(Decimal("2.344")) == Decimal("2.34")
    assert round_money(Decimal("0.005")) == Decimal("0.01")
    assert round_money(Decimal("40")) == Decimal("40.00")


def test_format_money_uses_symbol_and_two_decimals():
    assert format_money(Decimal("50")) == "$50.00"
    assert format_money(Decimal("1234.5"), "€") == "€1,234.50"


def test_price_summary_rounds_lines_and_total_consistently():
    lines = [
        CartLine(ProductId("a"), "A", Decimal("0.335"), 1),
        CartLine(ProductId("b"), "B", Decimal("0.335"), 2),
    ]
    summary = price_summary(lines)
    assert [p.total for p in summary.lines] == [Decimal("0.34"), Decimal("0.67")]
    assert summary.total == round_money(Decimal("1.005"))
    assert summary.total == Decimal("1.01")
    assert summary.item_count == 3
