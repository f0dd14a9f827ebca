"""Catalog Schemas — product listing and render descriptor responses."""

from pydantic import BaseModel

from storefront.core.catalog import Product
from storefront.core.pricing import format_money, round_money
from storefront.core.render import RenderRequest


class ProductResponse(BaseModel):
    id: str
    name: str
    unit_price: str
    price_display: str
    color_or_material: str
    description: str
    model_reference: str
    kind: str
    configurable: bool

    @classmethod
    def from_domain(cls, product: Product, currency_symbol: str = "$") -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            unit_price=str(round_money(product.unit_price)),
            price_display=format_money(product.unit_price, currency_symbol),
            color_or_material=product.color_or_material,
            description=product.description,
            model_reference=product.model_reference,
            kind=product.kind.value,
            configurable=product.configurable,
        )


class ProductListResponse(BaseModel):
    products: list[ProductResponse]


class MaterialResponse(BaseModel):
    metalness: float
    roughness: float
    scale: float


class RenderResponse(BaseModel):
    """Input for the external 3D renderer."""
    model_reference: str
    color_or_material: str
    material: MaterialResponse
    rotation_speed_rad_per_sec: float

    @classmethod
    def from_domain(cls, request: RenderRequest, speed: float) -> "RenderResponse":
        return cls(
            model_reference=request.model_reference,
            color_or_material=request.color_or_material,
            material=MaterialResponse(
                metalness=request.material.metalness,
                roughness=request.material.roughness,
                scale=request.material.scale,
            ),
            rotation_speed_rad_per_sec=speed,
        )
