"""Pricing Engine — pure derivation of line totals, cart total and item count.

Invariants:
    - Stateless: every call recomputes from the snapshot it is given, nothing cached
    - cart_total == sum(line_total) over current lines, exactly (Decimal, unrounded)
    - Every displayed figure goes through round_money — one rule for cart,
      preview and checkout

Design Decisions:
    - Rounding rule: ROUND_HALF_UP to 0.01, applied at display time only;
      totals are summed from exact line totals before rounding
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from storefront.core.cart_store import CartLine

CENT = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """The single rounding rule for every displayed monetary figure."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal, symbol: str = "$") -> str:
    return f"{symbol}{round_money(amount):,.2f}"


def line_total(line: CartLine) -> Decimal:
    return line.unit_price * line.quantity


def cart_total(cart: Iterable[CartLine]) -> Decimal:
    return sum((line_total(line) for line in cart), Decimal(0))


def item_count(cart: Iterable[CartLine]) -> int:
    return sum(line.quantity for line in cart)


@dataclass(frozen=True)
class PricedLine:
    line: CartLine
    unit_price: Decimal
    total: Decimal


@dataclass(frozen=True)
class PriceSummary:
    """Display-ready view of a cart: rounded figures only."""
    lines: tuple[PricedLine, ...]
    total: Decimal
    item_count: int


def price_summary(cart: Iterable[CartLine]) -> PriceSummary:
    lines = tuple(cart)
    return PriceSummary(
        lines=tuple(
            PricedLine(
                line=line,
                unit_price=round_money(line.unit_price),
                total=round_money(line_total(line)),
            )
            for line in lines
        ),
        total=round_money(cart_total(lines)),
        item_count=item_count(lines),
    )
