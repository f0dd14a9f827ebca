"""Customization — one in-progress custom blade, from base product to cart line.

Invariants:
    - A session wraps exactly one AttributeConfigurator for one configurable product
    - submit() adds a derived product to the cart; the caller then discards the session
    - Derived product id is deterministic: same configuration → same cart line

Design Decisions:
    - Custom price = base product price; the configuration changes what is built,
      not what it costs
    - Derived model reference carries the display category as a fragment so the
      renderer can pick a blade variant without the core knowing about meshes
"""

import logging

from storefront.core.cart_store import CartLine, CartStore
from storefront.core.catalog import Product
from storefront.core.catalog_data import BLADE_OPTIONS
from storefront.core.configurator import (
    AttributeConfigurator,
    ConfigurableSpec,
    LengthGrid,
    display_category_for,
)
from storefront.core.domain_types import ProductId
from storefront.core.errors import ProductNotConfigurableError

logger = logging.getLogger(__name__)


def build_custom_product(base: Product, spec: ConfigurableSpec) -> Product:
    """The purchasable product a finished configuration turns into."""
    category = display_category_for(spec.blade_type)
    return Product(
        id=ProductId(f"{base.id}:{spec.signature}"),
        name=f"{base.name}: {spec.blade_type}, {spec.steel} steel",
        unit_price=base.unit_price,
        color_or_material=base.color_or_material,
        description=(
            f"{spec.wood} handle, {spec.tang.lower()} tang, "
            f"{spec.length} cm {spec.blade_type.lower()} blade in {spec.steel.lower()} steel."
        ),
        model_reference=f"{base.model_reference}#{category.value}",
        kind=base.kind,
    )


class CustomizationSession:
    """Configurator bound to the configurable product it customizes."""

    def __init__(self, base_product: Product, length_grid: LengthGrid):
        if not base_product.configurable:
            raise ProductNotConfigurableError(base_product.id)
        self.base_product = base_product
        self.configurator = AttributeConfigurator(BLADE_OPTIONS, length_grid)

    def preview_product(self) -> Product:
        return build_custom_product(self.base_product, self.configurator.snapshot())

    def submit(self, cart: CartStore) -> CartLine:
        product = self.preview_product()
        line = cart.add_one(product)
        logger.info(
            f"Custom blade added to cart, quantity now {line.quantity}",
            extra={"product_id": product.id},
        )
        return line
