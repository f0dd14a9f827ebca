"""Shop Sessions — per-shopper bundle of cart, checkout state and customization.

Invariants:
    - Each ShopSession owns its CartStore; nothing outside the session writes to it
    - At most one customization in progress per session; starting a new one
      discards the previous configuration
    - Registry holds at most max_sessions entries; the oldest is evicted first

Design Decisions:
    - In-memory registry, not DB/Redis: persistence across sessions is a non-goal
      and uvicorn runs single-process (state lost on restart is acceptable)
    - OrderedDict as an insertion-ordered bound: eviction is O(1)
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from storefront.core.boundary_protocols import FulfillmentGateway
from storefront.core.cart_store import CartLine, CartStore
from storefront.core.catalog import CatalogRegistry
from storefront.core.configurator import LengthGrid
from storefront.core.domain_types import ShopSessionId
from storefront.core.errors import ResourceNotFoundError
from storefront.services.checkout_coordinator import CheckoutCoordinator
from storefront.services.customization import CustomizationSession

logger = logging.getLogger(__name__)


@dataclass
class ShopSession:
    id: ShopSessionId
    cart: CartStore
    checkout: CheckoutCoordinator
    length_grid: LengthGrid
    catalog: CatalogRegistry
    customization: CustomizationSession | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def start_customization(self, product_id: str) -> CustomizationSession:
        product = self.catalog.get(product_id)
        self.customization = CustomizationSession(product, self.length_grid)
        return self.customization

    def require_customization(self) -> CustomizationSession:
        if self.customization is None:
            raise ResourceNotFoundError("Customization", str(self.id))
        return self.customization

    def submit_customization(self) -> CartLine:
        line = self.require_customization().submit(self.cart)
        self.customization = None
        return line

    def abandon_customization(self) -> None:
        self.customization = None


class ShopSessionRegistry:
    """Bounded in-memory map of shop sessions."""

    def __init__(
        self,
        catalog: CatalogRegistry,
        fulfillment: FulfillmentGateway,
        length_grid: LengthGrid,
        max_sessions: int = 1000,
    ):
        self.catalog = catalog
        self.fulfillment = fulfillment
        self.length_grid = length_grid
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[ShopSessionId, ShopSession] = OrderedDict()

    def create(self) -> ShopSession:
        session_id = ShopSessionId(uuid4())
        cart = CartStore()
        session = ShopSession(
            id=session_id,
            cart=cart,
            checkout=CheckoutCoordinator(
                self.catalog, cart, self.fulfillment, session_id=str(session_id),
            ),
            length_grid=self.length_grid,
            catalog=self.catalog,
        )
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.warning(
                "Shop session evicted (registry full)",
                extra={"session_id": evicted},
            )
        return session

    def get(self, session_id: ShopSessionId) -> ShopSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise ResourceNotFoundError("Shop session", str(session_id))
        return session

    def delete(self, session_id: ShopSessionId) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise ResourceNotFoundError("Shop session", str(session_id))

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
