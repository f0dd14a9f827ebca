"""Customization Schemas — attribute navigation and the current blade configuration."""

from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.core.domain_types import BladeAttribute
from storefront.schemas.catalog import ProductResponse
from storefront.services.customization import CustomizationSession


class StartCustomizationRequest(BaseModel):
    product_id: str = Field(min_length=1, max_length=200)


class AttributeRequest(BaseModel):
    attribute: str = Field(min_length=1, max_length=50)


class SelectOptionRequest(BaseModel):
    index: int = Field(ge=0)


class LengthRequest(BaseModel):
    length: Decimal = Field(allow_inf_nan=False)


class LengthGridResponse(BaseModel):
    min: str
    max: str
    step: str


class CustomizationResponse(BaseModel):
    base_product_id: str
    selections: dict[str, str]
    indices: dict[str, int]
    options: dict[str, list[str]]
    length: str
    length_grid: LengthGridResponse
    display_category: str
    preview: ProductResponse

    @classmethod
    def from_domain(
        cls, session: CustomizationSession, currency_symbol: str = "$",
    ) -> "CustomizationResponse":
        configurator = session.configurator
        grid = configurator.length_grid
        return cls(
            base_product_id=session.base_product.id,
            selections={a.value: configurator.selected(a) for a in BladeAttribute},
            indices={a.value: configurator.index_of(a) for a in BladeAttribute},
            options={a.value: list(configurator.options(a)) for a in BladeAttribute},
            length=str(configurator.length),
            length_grid=LengthGridResponse(
                min=str(grid.minimum), max=str(grid.maximum), step=str(grid.step),
            ),
            display_category=configurator.derive_display_category().value,
            preview=ProductResponse.from_domain(
                session.preview_product(), currency_symbol,
            ),
        )
