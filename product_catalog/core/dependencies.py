"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection helpers shared by the API routers.

Usage:
------
    @router.get("/products")
    async def list_products(store: ProductStore = Depends(get_store)):
        ...

==============================================================================
"""

from __future__ import annotations

from fastapi import Request

from product_catalog.catalog.store import ProductStore
from product_catalog.config import Settings, get_settings


def get_store(request: Request) -> ProductStore:
    """
    FastAPI dependency returning the application's product store.

    The store is attached to ``app.state`` by the application factory.
    """
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the application was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()
