"""Shop Session Routes — session lifecycle, cart edits and the checkout dialog flow.

Invariants:
    - Every route resolves its ShopSession via get_shop_session (404 if unknown)
    - Cart edits go through CartStore; dialog transitions through CheckoutCoordinator
    - Invalid transitions → 409, empty checkout fields → 400 with one detail per field

Design Decisions:
    - begin_checkout on an empty cart answers 200 with started=false: the action is
      unavailable, not an error
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import (
    get_catalog,
    get_shop_session,
    get_shop_sessions,
)
from storefront.config import Settings, get_settings
from storefront.core.catalog import CatalogRegistry
from storefront.core.domain_types import ShopSessionId
from storefront.schemas.cart import AddItemRequest, CartResponse, UpdateQuantityRequest
from storefront.schemas.checkout import (
    BeginCheckoutResponse,
    CheckoutFieldsIn,
    OrderConfirmationResponse,
    ShopSessionResponse,
)
from storefront.services.shop_session import ShopSession, ShopSessionRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/shop-sessions", tags=["shop-sessions"])


def session_view(session: ShopSession, currency_symbol: str) -> ShopSessionResponse:
    state = session.checkout.state
    return ShopSessionResponse(
        id=session.id,
        phase=state.phase.value,
        previewed_product_id=state.previewed_product_id,
        available_actions=session.checkout.available_actions(),
        customization_active=session.customization is not None,
        orders_submitted=state.orders_submitted,
        cart=CartResponse.from_snapshot(session.cart.snapshot(), currency_symbol),
    )


# ─── Lifecycle ───────────────────────────────────────────────────

@router.post(
    "", response_model=ShopSessionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_shop_session(
    registry: ShopSessionRegistry = Depends(get_shop_sessions),
    settings: Settings = Depends(get_settings),
):
    session = registry.create()
    logger.info("Shop session created", extra={"session_id": session.id})
    return session_view(session, settings.currency_symbol)


@router.get("/{session_id}", response_model=ShopSessionResponse)
async def get_shop_session_view(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    return session_view(session, settings.currency_symbol)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shop_session(
    session_id: UUID, registry: ShopSessionRegistry = Depends(get_shop_sessions),
):
    registry.delete(ShopSessionId(session_id))


# ─── Cart ────────────────────────────────────────────────────────

@router.get("/{session_id}/cart", response_model=CartResponse)
async def get_cart(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    return CartResponse.from_snapshot(session.cart.snapshot(), settings.currency_symbol)


@router.post("/{session_id}/cart/items", response_model=CartResponse)
async def add_cart_item(
    body: AddItemRequest,
    session: ShopSession = Depends(get_shop_session),
    catalog: CatalogRegistry = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Add one unit of a catalog product (merges into an existing line)."""
    session.cart.add_one(catalog.get(body.product_id))
    return CartResponse.from_snapshot(session.cart.snapshot(), settings.currency_symbol)


@router.patch("/{session_id}/cart/items/{product_id:path}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    body: UpdateQuantityRequest,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    """Change a line's quantity by delta; reaching zero removes the line."""
    session.cart.update_quantity(product_id, body.delta)
    return CartResponse.from_snapshot(session.cart.snapshot(), settings.currency_symbol)


@router.delete("/{session_id}/cart/items/{product_id:path}", response_model=CartResponse)
async def remove_cart_item(
    product_id: str,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.cart.remove_all(product_id)
    return CartResponse.from_snapshot(session.cart.snapshot(), settings.currency_symbol)


# ─── Dialog flow ─────────────────────────────────────────────────

@router.post("/{session_id}/preview", response_model=ShopSessionResponse)
async def open_preview(
    body: AddItemRequest,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.checkout.open_preview(body.product_id)
    return session_view(session, settings.currency_symbol)


@router.post("/{session_id}/preview/close", response_model=ShopSessionResponse)
async def close_preview(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.checkout.close_preview()
    return session_view(session, settings.currency_symbol)


@router.post("/{session_id}/preview/add-to-cart", response_model=ShopSessionResponse)
async def add_previewed_to_cart(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.checkout.add_to_cart()
    return session_view(session, settings.currency_symbol)


@router.post("/{session_id}/cart/open", response_model=ShopSessionResponse)
async def open_cart(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.checkout.open_cart()
    return session_view(session, settings.currency_symbol)


@router.post("/{session_id}/cart/close", response_model=ShopSessionResponse)
async def close_cart(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.checkout.close_cart()
    return session_view(session, settings.currency_symbol)


@router.post("/{session_id}/checkout/begin", response_model=BeginCheckoutResponse)
async def begin_checkout(session: ShopSession = Depends(get_shop_session)):
    started = session.checkout.begin_checkout()
    return BeginCheckoutResponse(
        started=started,
        phase=session.checkout.phase.value,
        reason=None if started else "cart_empty",
    )


@router.post("/{session_id}/checkout/cancel", response_model=ShopSessionResponse)
async def cancel_checkout(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.checkout.cancel_checkout()
    return session_view(session, settings.currency_symbol)


@router.post("/{session_id}/checkout/submit", response_model=OrderConfirmationResponse)
async def submit_order(
    body: CheckoutFieldsIn, session: ShopSession = Depends(get_shop_session),
):
    confirmation = session.checkout.submit(body.to_domain())
    return OrderConfirmationResponse.from_domain(
        confirmation, session.checkout.phase.value,
    )
