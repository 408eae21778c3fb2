"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from product_catalog.config import get_settings, Settings
    
    settings = get_settings()
    print(settings.app_name)
    print(settings.products_path)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
