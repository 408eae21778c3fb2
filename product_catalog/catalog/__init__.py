"""
==============================================================================
Catalog Package - Product Records
==============================================================================

In-memory product store and the listing query functions.

Classes:
--------
- Product: Pydantic model for product records
- ProductStore: Lock-guarded in-memory collection

Functions:
----------
- compute_listing: Filtered, paginated view of a product list
- parse_listing_params: Parse raw page/limit/search values

==============================================================================
"""

from .models import REQUIRED_FIELDS, Product
from .store import ProductStore
from .query import (
    ListingParams,
    compute_listing,
    filter_by_name,
    paginate,
    parse_listing_params,
)

__all__ = [
    "REQUIRED_FIELDS",
    "Product",
    "ProductStore",
    "ListingParams",
    "compute_listing",
    "filter_by_name",
    "paginate",
    "parse_listing_params",
]
