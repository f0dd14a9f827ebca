"""Boundary Protocols — contracts between core and external collaborators.

Invariants:
    - Core NEVER imports from the shell — dependency arrows point inward only
    - Implementations provided by services/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from storefront.core.order import OrderConfirmation, OrderSnapshot


class FulfillmentGateway(Protocol):
    """Receives a finalized order. Transmission details are the gateway's concern."""
    def submit_order(self, order: OrderSnapshot) -> OrderConfirmation: ...
