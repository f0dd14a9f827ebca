"""Checkout Schemas — shop session view, checkout fields, order confirmation.

Invariants:
    - CheckoutFieldsIn reads missing and null fields as "" so emptiness is
      reported per field by core/enforce_checkout.py, not by Pydantic
    - Field length capped at the boundary (500 chars)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from storefront.core.order import CheckoutFields, OrderConfirmation
from storefront.schemas.cart import CartResponse


class CheckoutFieldsIn(BaseModel):
    name: str = Field("", max_length=500)
    email: str = Field("", max_length=500)
    address: str = Field("", max_length=500)
    city: str = Field("", max_length=500)
    zip_code: str = Field("", max_length=500)
    payment_token: str = Field("", max_length=500)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    def to_domain(self) -> CheckoutFields:
        return CheckoutFields(**self.model_dump())


class ShopSessionResponse(BaseModel):
    id: UUID
    phase: str
    previewed_product_id: str | None = None
    available_actions: list[str]
    customization_active: bool
    orders_submitted: int
    cart: CartResponse


class BeginCheckoutResponse(BaseModel):
    started: bool
    phase: str
    reason: str | None = None


class OrderConfirmationResponse(BaseModel):
    order_id: UUID
    status: str
    received_at: datetime
    phase: str

    @classmethod
    def from_domain(
        cls, confirmation: OrderConfirmation, phase: str,
    ) -> "OrderConfirmationResponse":
        return cls(
            order_id=confirmation.order_id,
            status=confirmation.status.value,
            received_at=confirmation.received_at,
            phase=phase,
        )
