"""Catalog Routes — read-only product listing, lookup and render descriptors.

Invariants:
    - Unknown product id → 404 PRODUCT_NOT_FOUND via the global handler
    - Listing order is the catalog's registration order
"""

from fastapi import APIRouter, Depends, Query

from storefront.api.dependencies import get_catalog
from storefront.config import Settings, get_settings
from storefront.core.catalog import CatalogRegistry
from storefront.core.domain_types import ProductKind
from storefront.core.render import ROTATION_SPEED_RAD_PER_SEC, render_request_for
from storefront.schemas.catalog import ProductListResponse, ProductResponse, RenderResponse

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("/products", response_model=ProductListResponse)
async def list_products(
    kind: ProductKind | None = Query(None),
    catalog: CatalogRegistry = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """List products, optionally one catalog section."""
    return ProductListResponse(products=[
        ProductResponse.from_domain(p, settings.currency_symbol)
        for p in catalog.list(kind)
    ])


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    catalog: CatalogRegistry = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    return ProductResponse.from_domain(
        catalog.get(product_id), settings.currency_symbol,
    )


@router.get("/products/{product_id}/render", response_model=RenderResponse)
async def get_render_descriptor(
    product_id: str, catalog: CatalogRegistry = Depends(get_catalog),
):
    """What the 3D renderer needs to draw this product."""
    return RenderResponse.from_domain(
        render_request_for(catalog.get(product_id)), ROTATION_SPEED_RAD_PER_SEC,
    )
