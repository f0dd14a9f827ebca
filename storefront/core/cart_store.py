"""Cart Store — the single-owner cart with merge-on-add and floor-at-zero removal.

Invariants:
    - A line with quantity <= 0 never exists — it is removed, never kept at 0
    - unit_price is snapshotted on first add and never overwritten by later adds
    - Insertion order preserved for display; irrelevant to totals
    - Readers only ever get an immutable CartSnapshot

Design Decisions:
    - Price snapshot at first add is a product decision: a line keeps the price the
      shopper first saw even if the catalog price changes afterwards
    - Unknown ids on update/remove are no-ops: absence is already the post-condition
    - Lines are frozen dataclasses replaced on change (dataclasses.replace), so a
      snapshot taken earlier can never observe later mutations
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterator

from storefront.core.catalog import Product
from storefront.core.domain_types import ProductId


@dataclass(frozen=True)
class CartLine:
    """One product's quantity and price snapshot."""
    product_id: ProductId
    name: str
    unit_price: Decimal
    quantity: int


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only copy of the cart at one point in time."""
    lines: tuple[CartLine, ...] = ()

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def get(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None


class CartStore:
    """Authoritative cart. All mutations go through these methods."""

    def __init__(self):
        self._lines: dict[str, CartLine] = {}

    def add_one(self, product: Product) -> CartLine:
        """Merge into the existing line or insert a new one at quantity 1."""
        existing = self._lines.get(product.id)
        if existing is not None:
            line = replace(existing, quantity=existing.quantity + 1)
        else:
            line = CartLine(
                product_id=product.id,
                name=product.name,
                unit_price=product.unit_price,
                quantity=1,
            )
        self._lines[product.id] = line
        return line

    def update_quantity(self, product_id: str, delta: int) -> CartLine | None:
        """Apply delta, flooring at zero. Returns the updated line, or None if removed/absent."""
        existing = self._lines.get(product_id)
        if existing is None:
            return None
        new_quantity = max(0, existing.quantity + delta)
        if new_quantity == 0:
            del self._lines[product_id]
            return None
        line = replace(existing, quantity=new_quantity)
        self._lines[product_id] = line
        return line

    def remove_all(self, product_id: str) -> None:
        existing = self._lines.get(product_id)
        if existing is None:
            return
        self.update_quantity(product_id, -existing.quantity)

    def clear(self) -> None:
        self._lines.clear()

    def get_line(self, product_id: str) -> CartLine | None:
        return self._lines.get(product_id)

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(lines=tuple(self._lines.values()))

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    def __len__(self) -> int:
        return len(self._lines)
