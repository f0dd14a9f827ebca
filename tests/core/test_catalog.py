"""Catalog Registry — tests for static product lookup.

Tests cover:
    - get() returns products, raises ProductNotFoundError for unknown ids
    - list() order is stable and filterable by kind
    - Products are immutable; duplicate ids rejected
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from storefront.core.catalog import CatalogRegistry, Product
from storefront.core.catalog_data import CUSTOM_BLADE_ID, RINGS, build_catalog
from storefront.core.domain_types import ProductId, ProductKind
from storefront.core.errors import ProductNotFoundError


def test_get_returns_registered_product():
    catalog = build_catalog()
    product = catalog.get("ring-gold")
    assert product.name == "Gold Ring"
    assert product.unit_price == Decimal("100")


def test_get_unknown_id_raises_not_found():
    catalog = build_catalog()
    with pytest.raises(ProductNotFoundError) as exc_info:
        catalog.get("ring-unobtainium")
    assert exc_info.value.http_status == 404
    assert exc_info.value.code == "PRODUCT_NOT_FOUND"
    assert exc_info.value.product_id == "ring-unobtainium"


def test_list_is_stable_registration_order():
    catalog = build_catalog()
    first = [p.id for p in catalog.list()]
    second = [p.id for p in catalog.list()]
    assert first == second
    assert first[:len(RINGS)] == [r.id for r in RINGS]


def test_list_filters_by_kind():
    catalog = build_catalog()
    rings = catalog.list(ProductKind.RING)
    blades = catalog.list(ProductKind.BLADE)
    assert len(rings) == 6
    assert [b.id for b in blades] == [CUSTOM_BLADE_ID]
    assert len(rings) + len(blades) == len(catalog)


def test_list_returns_immutable_sequence():
    assert isinstance(build_catalog().list(), tuple)


def test_products_are_frozen():
    product = build_catalog().get("ring-silver")
    with pytest.raises(FrozenInstanceError):
        product.unit_price = Decimal("1")


def test_duplicate_ids_rejected():
    product = Product(
        id=ProductId("dup"), name="Dup", unit_price=Decimal("1"),
        color_or_material="red", description="", model_reference="x.stl",
    )
    with pytest.raises(ValueError):
        CatalogRegistry([product, product])


def test_only_blade_is_configurable():
    catalog = build_catalog()
    assert [p.id for p in catalog.list() if p.configurable] == [CUSTOM_BLADE_ID]
    assert CUSTOM_BLADE_ID in catalog
