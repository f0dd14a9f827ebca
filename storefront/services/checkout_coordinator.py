"""Checkout Coordinator — preview/cart/checkout dialog state machine.

Invariants:
    - Follows impureim sandwich: read state → pure guard → mutate / call fulfillment
    - begin_checkout on an empty cart is refused (returns False), never raises
    - submit with any empty field raises CheckoutValidationError and mutates nothing
    - The cart is cleared only after fulfillment accepted the order
    - Any action not accepted by the current phase raises InvalidTransitionError,
      state unchanged

Design Decisions:
    - Guards delegated entirely to core/enforce_checkout.py (Functional Core)
    - Fulfillment failures wrapped as FulfillmentError; state stays CHECKOUT_OPEN so
      the shopper can retry without re-entering the cart
"""

import logging

from storefront.core.boundary_protocols import FulfillmentGateway
from storefront.core.cart_store import CartLine, CartStore
from storefront.core.catalog import CatalogRegistry, Product
from storefront.core.checkout_state import CheckoutState
from storefront.core.domain_types import CheckoutPhase
from storefront.core.enforce_checkout import (
    available_actions,
    check_action_allowed,
    check_cart_not_empty,
    validate_checkout_fields,
)
from storefront.core.errors import (
    CheckoutValidationError,
    EmptyCartError,
    ErrorContext,
    FulfillmentError,
    InvalidTransitionError,
    StorefrontError,
)
from storefront.core.order import CheckoutFields, OrderConfirmation, OrderSnapshot

logger = logging.getLogger(__name__)


class CheckoutCoordinator:
    """Gates order submission on cart contents and field validity."""

    def __init__(
        self,
        catalog: CatalogRegistry,
        cart: CartStore,
        fulfillment: FulfillmentGateway,
        state: CheckoutState | None = None,
        session_id: str | None = None,
    ):
        self._catalog = catalog
        self._cart = cart
        self._fulfillment = fulfillment
        self.state = state or CheckoutState()
        self._session_id = session_id

    @property
    def phase(self) -> CheckoutPhase:
        return self.state.phase

    def available_actions(self) -> list[str]:
        return available_actions(self.state.phase, self._cart.snapshot())

    # --- Preview -----------------------------------------------------------------

    def open_preview(self, product_id: str) -> Product:
        self._require("open_preview")
        product = self._catalog.get(product_id)
        self.state.transition_to(CheckoutPhase.PREVIEW_OPEN, product.id)
        self._log_transition("open_preview", product.id)
        return product

    def close_preview(self) -> None:
        self._require("close_preview")
        self.state.transition_to(CheckoutPhase.IDLE)
        self._log_transition("close_preview")

    def add_to_cart(self) -> CartLine:
        """Add the previewed product, then close the preview."""
        self._require("add_to_cart")
        product = self._catalog.get(self.state.previewed_product_id)
        line = self._cart.add_one(product)
        self.state.transition_to(CheckoutPhase.IDLE)
        logger.debug(
            f"Added from preview, quantity now {line.quantity}",
            extra={"session_id": self._session_id, "product_id": product.id},
        )
        return line

    # --- Cart --------------------------------------------------------------------

    def open_cart(self) -> None:
        self._require("open_cart")
        self.state.transition_to(CheckoutPhase.CART_OPEN)
        self._log_transition("open_cart")

    def close_cart(self) -> None:
        self._require("close_cart")
        self.state.transition_to(CheckoutPhase.IDLE)
        self._log_transition("close_cart")

    # --- Checkout ----------------------------------------------------------------

    def begin_checkout(self) -> bool:
        """Open checkout. Returns False (no state change) while the cart is empty."""
        self._require("begin_checkout")
        if check_cart_not_empty(self._cart.snapshot()):
            logger.info(
                "Checkout refused: cart is empty",
                extra={"session_id": self._session_id, "phase": self.state.phase.value},
            )
            return False
        self.state.transition_to(CheckoutPhase.CHECKOUT_OPEN)
        self._log_transition("begin_checkout")
        return True

    def cancel_checkout(self) -> None:
        self._require("cancel_checkout")
        self.state.transition_to(CheckoutPhase.IDLE)
        self._log_transition("cancel_checkout")

    def submit(self, checkout_fields: CheckoutFields) -> OrderConfirmation:
        """Validate, hand the order to fulfillment, clear the cart, return to IDLE."""
        self._require("submit")

        # ── PURE: validate ──
        field_errors = validate_checkout_fields(checkout_fields)
        if field_errors:
            raise CheckoutValidationError(field_errors, self._context())
        cart = self._cart.snapshot()
        if check_cart_not_empty(cart):
            raise EmptyCartError(self._context())

        # ── IMPURE: hand off, then clear ──
        order = OrderSnapshot.capture(checkout_fields.stripped(), cart)
        try:
            confirmation = self._fulfillment.submit_order(order)
        except StorefrontError:
            raise
        except Exception as e:
            logger.error(
                f"Fulfillment failed: {e}", exc_info=True,
                extra={"session_id": self._session_id, "order_id": order.order_id},
            )
            raise FulfillmentError(str(e), self._context()) from e

        self._cart.clear()
        self.state.transition_to(CheckoutPhase.SUBMITTED)
        self.state.orders_submitted += 1
        self.state.transition_to(CheckoutPhase.IDLE)
        logger.info(
            "Order submitted",
            extra={"session_id": self._session_id, "order_id": order.order_id},
        )
        return confirmation

    def _require(self, action: str) -> None:
        error = check_action_allowed(self.state.phase, action)
        if error:
            logger.warning(
                error["message"],
                extra={
                    "session_id": self._session_id,
                    "error_code": error["error_code"],
                    "phase": self.state.phase.value,
                },
            )
            raise InvalidTransitionError(
                action, self.state.phase.value, self._context(),
            )

    def _log_transition(self, action: str, product_id: str | None = None) -> None:
        logger.debug(
            f"{action} -> {self.state.phase.value}",
            extra={
                "session_id": self._session_id,
                "product_id": product_id,
                "phase": self.state.phase.value,
            },
        )

    def _context(self) -> ErrorContext:
        return ErrorContext(session_id=self._session_id)
