"""Domain Types — rich types that replace bare primitives across the storefront.

Invariants:
    - ProductId and ShopSessionId are distinct NewTypes, never mixed
    - Money is always Decimal, never float
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (API returns them as-is)
"""

from decimal import Decimal
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", str)
ShopSessionId = NewType("ShopSessionId", UUID)
OrderId = NewType("OrderId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", Decimal)


# ─── Enums ───────────────────────────────────────────────────────

class ProductKind(str, Enum):
    """Catalog sections."""
    RING = "ring"
    BLADE = "blade"


class BladeAttribute(str, Enum):
    """Enumerated attributes of a custom blade. Length is numeric, not listed here."""
    WOOD = "wood"
    TANG = "tang"
    BLADE_TYPE = "blade_type"
    STEEL = "steel"


class DisplayCategory(str, Enum):
    """Display token derived from the blade type. CLASSIC is the fallback."""
    KITCHEN = "kitchen"
    TACTICAL = "tactical"
    OUTDOOR = "outdoor"
    CLASSIC = "classic"


class CheckoutPhase(str, Enum):
    """Dialog states of the checkout coordinator."""
    IDLE = "idle"
    PREVIEW_OPEN = "preview_open"
    CART_OPEN = "cart_open"
    CHECKOUT_OPEN = "checkout_open"
    SUBMITTED = "submitted"


class OrderStatus(str, Enum):
    RECEIVED = "received"


# ─── Constants ───────────────────────────────────────────────────

REQUIRED_CHECKOUT_FIELDS = (
    "name", "email", "address", "city", "zip_code", "payment_token",
)
