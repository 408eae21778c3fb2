"""
==============================================================================
Product Store Module
==============================================================================

In-memory product store seeded from a JSON document.

Features:
---------
- Insertion order preserved
- Running-maximum id assignment
- All mutations serialized through one lock
- Read operations return snapshots

JSON Structure:
--------------
{
  "products": [
    {"id": 1, "gvtId": 1001, "name": "Alpha Pass", ...},
    ...
  ]
}

A bare top-level list of products is accepted as well.

==============================================================================
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductStore:
    """
    Authoritative in-memory product collection.

    One store is created per application instance and handed to the
    request handlers. Every mutation runs under ``self._lock`` so two
    concurrent creates can never be assigned the same id.

    Example:
        >>> store = ProductStore([Product(id=1, name="Alpha Pass")])
        >>> store.add({"name": "Beta Pass"}).id
        2
        >>> store.remove(1).name
        'Alpha Pass'
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._lock = threading.Lock()
        self._products: List[Product] = list(products or [])

    @classmethod
    def from_file(cls, products_file: Path) -> "ProductStore":
        """Create a store seeded from a JSON file."""
        store = cls()
        store.load(products_file)
        return store

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self, products_file: Path) -> int:
        """
        Replace the store contents with the records in ``products_file``.

        Args:
            products_file: Path to the seed JSON document

        Returns:
            Number of products loaded
        """
        try:
            with Path(products_file).open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Products file not found: {products_file}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {products_file}: {e}")
            raise

        items = data.get("products", []) if isinstance(data, dict) else data
        products = [Product.model_validate(item) for item in items]

        with self._lock:
            self._products = products

        logger.info(f"Loaded {len(products)} products from {products_file}")
        return len(products)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def all(self) -> List[Product]:
        """Get a snapshot of all products in insertion order."""
        with self._lock:
            return self._products.copy()

    def count(self) -> int:
        return len(self._products)

    def __len__(self) -> int:
        return self.count()

    def find(self, product_id: Optional[int]) -> Optional[Product]:
        """Find a product by id (linear scan)."""
        if product_id is None:
            return None
        with self._lock:
            return self._find_unlocked(product_id)

    def next_id(self) -> int:
        """Id the next ``add`` would assign."""
        with self._lock:
            return self._next_id_unlocked()

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add(self, fields: Dict[str, Any]) -> Product:
        """
        Append a new product and assign it the next id.

        Any ``id`` in ``fields`` is ignored; other values are stored as given.
        """
        data = {key: value for key, value in fields.items() if key != "id"}

        with self._lock:
            product = Product.model_validate({**data, "id": self._next_id_unlocked()})
            self._products.append(product)

        logger.info(f"Created product {product.id}: {product.name!r}")
        return product

    def replace(self, product_id: int, fields: Dict[str, Any]) -> Optional[Product]:
        """
        Shallow-merge ``fields`` over a stored product, keeping its id.

        Returns:
            The merged product, or None if no product has ``product_id``
        """
        with self._lock:
            index = self._index_unlocked(product_id)
            if index is None:
                return None

            updated = self._products[index].merged(fields)
            self._products[index] = updated

        logger.info(f"Updated product {product_id}")
        return updated

    def remove(self, product_id: int) -> Optional[Product]:
        """
        Remove a product.

        Returns:
            The removed product, or None if no product has ``product_id``
        """
        with self._lock:
            index = self._index_unlocked(product_id)
            if index is None:
                return None
            removed = self._products.pop(index)

        logger.info(f"Deleted product {product_id}")
        return removed

    # =========================================================================
    # INTERNALS (caller holds the lock)
    # =========================================================================

    def _next_id_unlocked(self) -> int:
        return max([0, *(p.id for p in self._products)]) + 1

    def _index_unlocked(self, product_id: int) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def _find_unlocked(self, product_id: int) -> Optional[Product]:
        index = self._index_unlocked(product_id)
        return self._products[index] if index is not None else None
