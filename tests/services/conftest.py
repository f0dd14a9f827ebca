"""Service test fixtures — catalog, cart, fulfillment fake and coordinator.

Invariants:
    - Every test gets a fresh CartStore and coordinator
    - fulfillment is the real LoggingFulfillment (in-memory), failing_fulfillment raises
"""

from decimal import Decimal

import pytest
from unittest.mock import MagicMock

from storefront.core.cart_store import CartStore
from storefront.core.catalog_data import build_catalog
from storefront.core.configurator import LengthGrid
from storefront.core.order import CheckoutFields
from storefront.services.checkout_coordinator import CheckoutCoordinator
from storefront.services.fulfillment import LoggingFulfillment


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def cart():
    return CartStore()


@pytest.fixture
def fulfillment():
    return LoggingFulfillment()


@pytest.fixture
def coordinator(catalog, cart, fulfillment):
    return CheckoutCoordinator(catalog, cart, fulfillment, session_id="test-session")


@pytest.fixture
def failing_fulfillment():
    gateway = MagicMock()
    gateway.submit_order.side_effect = ConnectionError("warehouse offline")
    return gateway


@pytest.fixture
def length_grid():
    return LengthGrid(
        minimum=Decimal("15"), maximum=Decimal("30"),
        step=Decimal("0.5"), default=Decimal("20"),
    )


@pytest.fixture
def complete_fields():
    return CheckoutFields(
        name="Ada Smith", email="ada@example.com", address="1 Forge Lane",
        city="Sheffield", zip_code="S1 2AB", payment_token="tok_123",
    )
