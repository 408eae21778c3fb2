"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing the catalog operations.

Architecture Pattern: Service Layer
----------------------------------

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductService  │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  ProductStore   │  ← In-memory data
    └─────────────────┘

Usage:
------
    from product_catalog.services import ProductService

    service = ProductService(store)
    created = service.create_product(body)

==============================================================================
"""

from .product_service import ProductService

__all__ = [
    "ProductService",
]
