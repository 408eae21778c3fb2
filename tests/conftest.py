"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a fresh product store, application and test client per test.

==============================================================================
"""

import pytest
from typing import Any, Dict, Generator, List
from fastapi.testclient import TestClient

from product_catalog.catalog.models import Product
from product_catalog.catalog.store import ProductStore
from product_catalog.config import Settings
from product_catalog.main import Application


# ============================================================================
# DATA FIXTURES
# ============================================================================

def make_product(product_id: int, name: str, /, **overrides: Any) -> Product:
    """Build a fully populated product record."""
    slug = name.lower().replace(" ", "-")
    fields = {
        "id": product_id,
        "gvtId": 1000 + product_id,
        "name": name,
        "productTagline": f"{name} tagline",
        "shortDescription": f"{name} short",
        "longDescription": f"{name} long description",
        "logoLocation": f"https://example.com/logos/{slug}.png",
        "productUrl": f"https://example.com/products/{slug}",
        "voucherTypeName": "DIGITAL",
        "orderUrl": f"https://example.com/order/{slug}",
        "productTitle": name,
        "variableDenomPriceMinAmount": "10.00",
        "variableDenomPriceMaxAmount": "100.00",
        "__typename": "Product",
    }
    fields.update(overrides)
    return Product.model_validate(fields)


def create_payload(**overrides: Any) -> Dict[str, Any]:
    """Body with all nine required fields for POST /api/products."""
    payload = {
        "gvtId": 2001,
        "name": "Delta Voucher",
        "productTagline": "Save on Delta",
        "shortDescription": "Delta short",
        "longDescription": "Delta long description",
        "productUrl": "https://example.com/products/delta",
        "voucherTypeName": "DIGITAL",
        "orderUrl": "https://example.com/order/delta",
        "productTitle": "Delta Voucher",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def products() -> List[Product]:
    """Three seed products."""
    return [
        make_product(1, "Alpha Pass"),
        make_product(2, "Beta Pass"),
        make_product(3, "Gamma Gift Card"),
    ]


@pytest.fixture
def store(products: List[Product]) -> ProductStore:
    """Fresh store for each test."""
    return ProductStore(products)


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment's .env file."""
    return Settings(_env_file=None, debug=False, default_page_limit=10)


@pytest.fixture
def application(settings: Settings, store: ProductStore) -> Application:
    return Application(settings=settings, store=store)


@pytest.fixture
def client(application: Application) -> Generator[TestClient, None, None]:
    """Create test client bound to a per-test store."""
    with TestClient(application.app) as test_client:
        yield test_client
