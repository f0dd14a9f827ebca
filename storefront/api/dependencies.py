"""API Dependencies — process-wide catalog and shop session registry.

Invariants:
    - One CatalogRegistry per process, built from static catalog data
    - One ShopSessionRegistry per process, created lazily from settings

Design Decisions:
    - Module-level registry: deliberate exception to the no-global-state rule
      (single-process uvicorn, state lost on restart is acceptable)
    - Exposed as FastAPI dependencies so tests swap them via dependency_overrides
"""

from functools import lru_cache
from uuid import UUID

from fastapi import Depends

from storefront.config import Settings, get_settings
from storefront.core.catalog import CatalogRegistry
from storefront.core.catalog_data import build_catalog
from storefront.core.configurator import LengthGrid
from storefront.core.domain_types import ShopSessionId
from storefront.services.fulfillment import LoggingFulfillment
from storefront.services.shop_session import ShopSession, ShopSessionRegistry

_registry: ShopSessionRegistry | None = None


@lru_cache
def get_catalog() -> CatalogRegistry:
    return build_catalog()


def length_grid_from(settings: Settings) -> LengthGrid:
    return LengthGrid(
        minimum=settings.blade_length_min_cm,
        maximum=settings.blade_length_max_cm,
        step=settings.blade_length_step_cm,
        default=settings.blade_length_default_cm,
    )


def build_registry(settings: Settings, catalog: CatalogRegistry) -> ShopSessionRegistry:
    return ShopSessionRegistry(
        catalog=catalog,
        fulfillment=LoggingFulfillment(),
        length_grid=length_grid_from(settings),
        max_sessions=settings.max_shop_sessions,
    )


def get_shop_sessions() -> ShopSessionRegistry:
    global _registry
    if _registry is None:
        _registry = build_registry(get_settings(), get_catalog())
    return _registry


def get_shop_session(
    session_id: UUID,
    registry: ShopSessionRegistry = Depends(get_shop_sessions),
) -> ShopSession:
    return registry.get(ShopSessionId(session_id))
