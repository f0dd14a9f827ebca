"""Forge Storefront — product configuration, cart and checkout engine behind a FastAPI shell."""

__version__ = "1.0.0"
