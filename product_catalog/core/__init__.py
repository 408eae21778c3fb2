"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- Exception factory functions for common error scenarios
- FastAPI dependencies for the store and settings

Usage:
------
    from product_catalog.core import AppException, get_store

    from product_catalog.core import exceptions
    raise exceptions.product_not_found(42)

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import get_app_settings, get_store

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_app_settings",
    "get_store",
]
