"""Order Records — typed checkout fields and the immutable order snapshot.

Invariants:
    - CheckoutFields is the only checkout payload shape — no untyped form blobs
    - OrderSnapshot is frozen: fields + cart lines captured at submission time
    - total and item_count on the snapshot are derived by the pricing engine
"""

from dataclasses import dataclass, field, fields as dataclass_fields
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from storefront.core.cart_store import CartSnapshot
from storefront.core.domain_types import OrderId, OrderStatus
from storefront.core.pricing import cart_total, item_count, round_money


@dataclass(frozen=True)
class CheckoutFields:
    """The six required checkout fields. Emptiness is judged by enforce_checkout."""
    name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    zip_code: str = ""
    payment_token: str = ""

    def as_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in dataclass_fields(self)}

    def stripped(self) -> "CheckoutFields":
        return CheckoutFields(**{
            key: (value.strip() if isinstance(value, str) else value)
            for key, value in self.as_dict().items()
        })


@dataclass(frozen=True)
class OrderSnapshot:
    """Everything fulfillment needs, frozen at the moment of submission."""
    fields: CheckoutFields
    cart: CartSnapshot
    total: Decimal
    item_count: int
    order_id: OrderId = field(default_factory=lambda: OrderId(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def capture(cls, checkout_fields: CheckoutFields, cart: CartSnapshot) -> "OrderSnapshot":
        return cls(
            fields=checkout_fields,
            cart=cart,
            total=round_money(cart_total(cart)),
            item_count=item_count(cart),
        )


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: OrderId
    status: OrderStatus = OrderStatus.RECEIVED
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
