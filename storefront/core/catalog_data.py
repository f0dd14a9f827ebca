"""Catalog Data — the storefront's static product list and blade option domains.

Invariants:
    - Every option list is non-empty and ordered (index 0 is the default selection)
    - All rings share the same model asset; color differs per ring

Design Decisions:
    - Module-level constants over a data file: catalog is fixed at process start
"""

from decimal import Decimal

from storefront.core.catalog import CatalogRegistry, Product
from storefront.core.domain_types import BladeAttribute, ProductId, ProductKind

RING_MODEL_REFERENCE = "models/ring.stl"
BLADE_MODEL_REFERENCE = "models/blade.stl"
CUSTOM_BLADE_ID = ProductId("custom-blade")


RINGS: tuple[Product, ...] = (
    Product(
        id=ProductId("ring-silver"), name="Silver Ring", unit_price=Decimal("50"),
        color_or_material="silver",
        description="Polished sterling silver band.",
        model_reference=RING_MODEL_REFERENCE,
    ),
    Product(
        id=ProductId("ring-gold"), name="Gold Ring", unit_price=Decimal("100"),
        color_or_material="gold",
        description="Solid yellow gold band.",
        model_reference=RING_MODEL_REFERENCE,
    ),
    Product(
        id=ProductId("ring-rose-gold"), name="Rose Gold Ring", unit_price=Decimal("75"),
        color_or_material="#b76e79",
        description="Rose gold band with a warm copper tint.",
        model_reference=RING_MODEL_REFERENCE,
    ),
    Product(
        id=ProductId("ring-platinum"), name="Platinum Ring", unit_price=Decimal("120"),
        color_or_material="#e5e4e2",
        description="Dense platinum band, hand finished.",
        model_reference=RING_MODEL_REFERENCE,
    ),
    Product(
        id=ProductId("ring-bronze"), name="Bronze Ring", unit_price=Decimal("60"),
        color_or_material="#cd7f32",
        description="Cast bronze band with a satin finish.",
        model_reference=RING_MODEL_REFERENCE,
    ),
    Product(
        id=ProductId("ring-copper"), name="Copper Ring", unit_price=Decimal("40"),
        color_or_material="#b87333",
        description="Hammered copper band.",
        model_reference=RING_MODEL_REFERENCE,
    ),
)

BLADES: tuple[Product, ...] = (
    Product(
        id=CUSTOM_BLADE_ID, name="Custom Blade", unit_price=Decimal("180"),
        color_or_material="#c0c0c0",
        description="Hand-forged blade built to your wood, tang, type and steel.",
        model_reference=BLADE_MODEL_REFERENCE,
        kind=ProductKind.BLADE, configurable=True,
    ),
)


# ─── Custom blade option domains ─────────────────────────────────

BLADE_OPTIONS: dict[BladeAttribute, tuple[str, ...]] = {
    BladeAttribute.WOOD: ("Walnut", "Oak", "Maple", "Ebony", "Rosewood"),
    BladeAttribute.TANG: ("Full", "Partial", "Hidden", "Rat-tail"),
    BladeAttribute.BLADE_TYPE: ("Dagger", "Chef", "Hunting", "Tanto", "Bowie"),
    BladeAttribute.STEEL: ("Damascus", "Carbon", "Stainless", "Tool"),
}


def build_catalog() -> CatalogRegistry:
    """The registry loaded at process start."""
    return CatalogRegistry(RINGS + BLADES)
