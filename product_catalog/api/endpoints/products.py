"""
==============================================================================
Product Endpoints
==============================================================================

Collection endpoint (list, create) and item endpoint (read, update, delete)
for the product catalog.

    GET    /api/products          paginated, searchable listing
    POST   /api/products          create
    GET    /api/products/{id}     read
    PUT    /api/products/{id}     shallow update
    DELETE /api/products/{id}     delete

Other verbs on these paths answer 405.

==============================================================================
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from product_catalog.catalog.store import ProductStore
from product_catalog.config import Settings
from product_catalog.core.dependencies import get_app_settings, get_store
from product_catalog.services.product_service import ProductService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, store: ProductStore, settings: Settings):
        self._service = ProductService(store, settings)

    def list_all(self, page: Optional[str], limit: Optional[str], search: Optional[str]) -> dict:
        """List products with pagination and search."""
        return self._service.list_products(page=page, limit=limit, search=search)

    def create(self, body: Any) -> dict:
        """Create product."""
        return self._service.create_product(body)

    def get(self, product_id: str) -> dict:
        """Get product by id."""
        return self._service.get_product(product_id)

    def update(self, product_id: str, body: Any) -> dict:
        """Update product."""
        return self._service.update_product(product_id, body)

    def delete(self, product_id: str) -> dict:
        """Delete product."""
        return self._service.delete_product(product_id)


def get_controller(
    store: ProductStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings)
) -> ProductController:
    return ProductController(store, settings)


@router.get("")
async def list_products(
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Items per page"),
    search: Optional[str] = Query(None, description="Case-insensitive name filter"),
    controller: ProductController = Depends(get_controller)
):
    """List products with pagination and optional name search."""
    return controller.list_all(page, limit, search)


@router.post("")
async def create_product(
    body: Any = Body(None),
    controller: ProductController = Depends(get_controller)
):
    """Create a product; the id is assigned by the store."""
    return controller.create(body)


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    controller: ProductController = Depends(get_controller)
):
    """Get a product by id."""
    return controller.get(product_id)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    body: Any = Body(None),
    controller: ProductController = Depends(get_controller)
):
    """Shallow-merge the body over a product. The id never changes."""
    return controller.update(product_id, body)


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    controller: ProductController = Depends(get_controller)
):
    """Delete a product."""
    return controller.delete(product_id)
