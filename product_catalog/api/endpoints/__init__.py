"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- products: Product collection and item endpoints

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
