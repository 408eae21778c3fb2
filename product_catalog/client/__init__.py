"""
==============================================================================
Client Package
==============================================================================

HTTP client and cache-aware accessors for the product catalog API.

Usage:
------
    from product_catalog.client import ProductApiClient, ProductListQuery

    with ProductApiClient(base_url="http://localhost:8000") as api:
        listing = ProductListQuery(api, limit=5, search="pass")
        print(listing.data["pagination"])

==============================================================================
"""

from .api_client import ProductApiClient, ProductApiError
from .accessors import (
    FetchCache,
    FetchResult,
    ProductByIdQuery,
    ProductListQuery,
    default_cache,
    update_product,
)

__all__ = [
    "ProductApiClient",
    "ProductApiError",
    "FetchCache",
    "FetchResult",
    "ProductByIdQuery",
    "ProductListQuery",
    "default_cache",
    "update_product",
]
