"""Checkout State — the dialog state of one shopper, as a pure dataclass.

Invariants:
    - previewed_product_id is set iff phase == PREVIEW_OPEN
    - SUBMITTED is transient: the coordinator moves through it to IDLE in one call

Design Decisions:
    - Dataclass with a single transition_to mutator (no IO), coordinator owns the rules
"""

from dataclasses import dataclass

from storefront.core.domain_types import CheckoutPhase, ProductId


@dataclass
class CheckoutState:
    """Per-session dialog state — pure dataclass, no IO."""

    phase: CheckoutPhase = CheckoutPhase.IDLE
    previewed_product_id: ProductId | None = None
    orders_submitted: int = 0

    def transition_to(
        self, phase: CheckoutPhase, previewed_product_id: ProductId | None = None,
    ) -> None:
        self.phase = phase
        self.previewed_product_id = (
            previewed_product_id if phase == CheckoutPhase.PREVIEW_OPEN else None
        )
