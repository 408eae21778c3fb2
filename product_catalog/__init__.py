"""
==============================================================================
Product Catalog Service
==============================================================================

In-memory product catalog exposed through a REST API, with a small
client-side data-fetching layer.

==============================================================================
"""

__version__ = "1.0.0"
