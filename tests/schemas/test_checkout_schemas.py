"""Boundary schemas — request validation and display formatting of money.

Invariants:
    - Missing checkout fields default to "" (reported per field by the coordinator)
    - Checkout field length capped at 500 chars
    - product_id stripped; whitespace-only rejected
    - Money rendered as two-decimal strings, never floats
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.core.cart_store import CartStore
from storefront.core.catalog import Product
from storefront.schemas.cart import AddItemRequest, CartResponse
from storefront.schemas.catalog import ProductResponse
from storefront.schemas.checkout import CheckoutFieldsIn
from storefront.schemas.customization import LengthRequest


def _product(pid: str, price: str) -> Product:
    return Product(
        id=pid, name=pid.title(), unit_price=Decimal(price),
        color_or_material="silver", description="", model_reference="models/ring.stl",
    )


# --- CheckoutFieldsIn ---------------------------------------------------------

def test_checkout_fields_default_to_empty():
    fields = CheckoutFieldsIn(name="Ada").to_domain()
    assert fields.name == "Ada"
    assert fields.payment_token == ""


def test_checkout_field_max_length_enforced():
    with pytest.raises(ValidationError):
        CheckoutFieldsIn(address="x" * 501)


# --- AddItemRequest -----------------------------------------------------------

def test_add_item_request_strips_product_id():
    assert AddItemRequest(product_id="  ring-gold ").product_id == "ring-gold"


def test_add_item_request_rejects_whitespace():
    with pytest.raises(ValidationError):
        AddItemRequest(product_id="   ")


# --- LengthRequest ------------------------------------------------------------

def test_length_request_rejects_nan():
    with pytest.raises(ValidationError):
        LengthRequest(length="NaN")


def test_length_request_accepts_numeric_string():
    assert LengthRequest(length="17.3").length == Decimal("17.3")


# --- Money formatting ---------------------------------------------------------

def test_product_response_rounds_half_up():
    resp = ProductResponse.from_domain(_product("ring-odd", "19.995"), "€")
    assert resp.unit_price == "20.00"
    assert resp.price_display == "€20.00"


def test_cart_response_groups_thousands():
    cart = CartStore()
    product = _product("ring-big", "1250")
    cart.add_one(product)
    cart.add_one(product)
    resp = CartResponse.from_snapshot(cart.snapshot())
    assert resp.total == "2500.00"
    assert resp.total_display == "$2,500.00"
    assert resp.item_count == 2
