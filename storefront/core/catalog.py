"""Catalog Registry — static, read-only lookup of purchasable products.

Invariants:
    - Products are frozen once registered; registration order is the display order
    - Product ids are unique — duplicate ids rejected at construction
    - get() raises ProductNotFoundError for an unknown id, never returns None

Design Decisions:
    - Tuple + dict index built once: O(1) lookup, immutable listing
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from storefront.core.domain_types import ProductId, ProductKind
from storefront.core.errors import ProductNotFoundError


@dataclass(frozen=True)
class Product:
    """A purchasable product. unit_price is the current catalog price."""
    id: ProductId
    name: str
    unit_price: Decimal
    color_or_material: str
    description: str
    model_reference: str
    kind: ProductKind = ProductKind.RING
    configurable: bool = False


class CatalogRegistry:
    """Fixed product list with id lookup."""

    def __init__(self, products: Iterable[Product]):
        self._products = tuple(products)
        self._by_id: dict[str, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product id '{product.id}'")
            self._by_id[product.id] = product

    def get(self, product_id: str) -> Product:
        try:
            return self._by_id[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    def list(self, kind: ProductKind | None = None) -> tuple[Product, ...]:
        """All products in registration order, optionally one catalog section."""
        if kind is None:
            return self._products
        return tuple(p for p in self._products if p.kind == kind)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __len__(self) -> int:
        return len(self._products)
