"""Checkout Enforcement — pure guards for the checkout state machine.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Field validation returns one error dict per empty field (empty list on success)
    - Transition guards return an error dict on violation, None on success

Design Decisions:
    - Return dicts (not exceptions): the coordinator decides whether a violation is
      a refusal (begin_checkout on empty cart) or an error (everything else)
    - Whitespace-only counts as empty; no format checks beyond presence
"""

from storefront.core.cart_store import CartSnapshot
from storefront.core.domain_types import CheckoutPhase, REQUIRED_CHECKOUT_FIELDS
from storefront.core.order import CheckoutFields
from storefront.core.pricing import item_count


def validate_checkout_fields(checkout_fields: CheckoutFields) -> list[dict]:
    """One error per required field that is missing or blank."""
    values = checkout_fields.as_dict()
    errors = []
    for name in REQUIRED_CHECKOUT_FIELDS:
        value = values.get(name)
        if not isinstance(value, str) or not value.strip():
            errors.append({
                "field": name,
                "message": f"{name.replace('_', ' ').capitalize()} is required.",
                "type": "missing",
            })
    return errors


def check_cart_not_empty(cart: CartSnapshot) -> dict | None:
    """Checkout is unavailable while the cart holds no items."""
    if item_count(cart) <= 0:
        return {
            "status": "refused",
            "error_code": "CART_EMPTY",
            "message": "Add at least one item to the cart before checking out.",
        }
    return None


# Which actions each dialog state accepts
_ALLOWED_ACTIONS: dict[CheckoutPhase, frozenset[str]] = {
    CheckoutPhase.IDLE: frozenset({"open_preview", "open_cart"}),
    CheckoutPhase.PREVIEW_OPEN: frozenset({"close_preview", "add_to_cart"}),
    CheckoutPhase.CART_OPEN: frozenset({"close_cart", "begin_checkout"}),
    CheckoutPhase.CHECKOUT_OPEN: frozenset({"cancel_checkout", "submit"}),
    CheckoutPhase.SUBMITTED: frozenset(),
}


def check_action_allowed(phase: CheckoutPhase, action: str) -> dict | None:
    if action not in _ALLOWED_ACTIONS[phase]:
        return {
            "status": "error",
            "error_code": "INVALID_TRANSITION",
            "message": f"Action '{action}' is not available while {phase.value}.",
        }
    return None


def available_actions(phase: CheckoutPhase, cart: CartSnapshot) -> list[str]:
    """Actions the UI may offer now. begin_checkout disappears with an empty cart."""
    actions = sorted(_ALLOWED_ACTIONS[phase])
    if "begin_checkout" in actions and check_cart_not_empty(cart):
        actions.remove("begin_checkout")
    return actions
