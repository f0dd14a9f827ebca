"""Customization Routes — build a custom blade inside a shop session.

Invariants:
    - One customization per shop session; POST replaces any in-progress one
    - Unknown attribute → 400 UNKNOWN_ATTRIBUTE, configuration unchanged
    - Length out of range snaps to the grid boundary (never 400)
    - Explicit option index outside the list → 400 OPTION_INDEX_OUT_OF_RANGE
    - submit adds the custom blade to the cart and discards the configuration
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_shop_session
from storefront.api.routes.shop_sessions import session_view
from storefront.config import Settings, get_settings
from storefront.schemas.checkout import ShopSessionResponse
from storefront.schemas.customization import (
    AttributeRequest,
    CustomizationResponse,
    LengthRequest,
    SelectOptionRequest,
    StartCustomizationRequest,
)
from storefront.services.shop_session import ShopSession

router = APIRouter(
    prefix="/api/v1/shop-sessions/{session_id}/customization", tags=["customization"],
)


@router.post(
    "", response_model=CustomizationResponse, status_code=status.HTTP_201_CREATED,
)
async def start_customization(
    body: StartCustomizationRequest,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    customization = session.start_customization(body.product_id)
    return CustomizationResponse.from_domain(customization, settings.currency_symbol)


@router.get("", response_model=CustomizationResponse)
async def get_customization(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    return CustomizationResponse.from_domain(
        session.require_customization(), settings.currency_symbol,
    )


@router.post("/advance", response_model=CustomizationResponse)
async def advance_attribute(
    body: AttributeRequest,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    customization = session.require_customization()
    customization.configurator.advance(body.attribute)
    return CustomizationResponse.from_domain(customization, settings.currency_symbol)


@router.post("/retreat", response_model=CustomizationResponse)
async def retreat_attribute(
    body: AttributeRequest,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    customization = session.require_customization()
    customization.configurator.retreat(body.attribute)
    return CustomizationResponse.from_domain(customization, settings.currency_symbol)


@router.put("/length", response_model=CustomizationResponse)
async def set_length(
    body: LengthRequest,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    customization = session.require_customization()
    customization.configurator.set_length(body.length)
    return CustomizationResponse.from_domain(customization, settings.currency_symbol)


@router.put("/selections/{attribute}", response_model=CustomizationResponse)
async def select_option(
    attribute: str,
    body: SelectOptionRequest,
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    """Jump straight to one option of an attribute by its list index."""
    customization = session.require_customization()
    customization.configurator.select(attribute, body.index)
    return CustomizationResponse.from_domain(customization, settings.currency_symbol)


@router.post("/reset", response_model=CustomizationResponse)
async def reset_customization(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    customization = session.require_customization()
    customization.configurator.reset()
    return CustomizationResponse.from_domain(customization, settings.currency_symbol)


@router.post("/submit", response_model=ShopSessionResponse)
async def submit_customization(
    session: ShopSession = Depends(get_shop_session),
    settings: Settings = Depends(get_settings),
):
    session.submit_customization()
    return session_view(session, settings.currency_symbol)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def abandon_customization(session: ShopSession = Depends(get_shop_session)):
    session.require_customization()
    session.abandon_customization()
