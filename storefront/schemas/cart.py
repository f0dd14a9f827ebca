"""Cart Schemas — cart mutations and the priced cart view.

Invariants:
    - AddItemRequest.product_id non-empty, stripped
    - UpdateQuantityRequest.delta is any integer; flooring at zero is the cart's job
"""

from pydantic import BaseModel, Field, field_validator

from storefront.core.cart_store import CartSnapshot
from storefront.core.pricing import format_money, price_summary


class AddItemRequest(BaseModel):
    product_id: str = Field(min_length=1, max_length=200)

    @field_validator("product_id")
    @classmethod
    def strip_product_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("product_id cannot be empty or whitespace")
        return v


class UpdateQuantityRequest(BaseModel):
    delta: int


class CartLineResponse(BaseModel):
    product_id: str
    name: str
    unit_price: str
    quantity: int
    line_total: str


class CartResponse(BaseModel):
    lines: list[CartLineResponse]
    total: str
    total_display: str
    item_count: int

    @classmethod
    def from_snapshot(cls, cart: CartSnapshot, currency_symbol: str = "$") -> "CartResponse":
        summary = price_summary(cart)
        return cls(
            lines=[
                CartLineResponse(
                    product_id=priced.line.product_id,
                    name=priced.line.name,
                    unit_price=str(priced.unit_price),
                    quantity=priced.line.quantity,
                    line_total=str(priced.total),
                )
                for priced in summary.lines
            ],
            total=str(summary.total),
            total_display=format_money(summary.total, currency_symbol),
            item_count=summary.item_count,
        )
