"""
==============================================================================
Product Accessors Module
==============================================================================

Query objects that keep their last result in a shared FetchCache.

This module implements:
- FetchCache: Keyed result cache; concurrent fetches for one key share a
  single request
- ProductListQuery: Paginated, searchable listing. Changing page, limit or
  search re-issues the request; identical queries are served from the cache
- ProductByIdQuery: Single product; changing product_id re-issues the request
- update_product: Imperative PUT. Failures are logged and re-raised
  unchanged, without retry

Cache Keys:
-----------
- products:{"page": 1, "limit": 10, "search": "..."}   listings
- product-{id}                                         single products

==============================================================================
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from .api_client import ProductApiClient, ProductApiError


logger = logging.getLogger(__name__)

LIST_KEY_PREFIX = "products:"
ITEM_KEY_PREFIX = "product-"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a fetch: ``data`` on success, ``error`` on failure."""

    data: Any = None
    error: Optional[ProductApiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FetchCache:
    """Keyed result cache with per-key request deduplication."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: Dict[str, FetchResult] = {}
        self._inflight: Dict[str, threading.Event] = {}

    def get(self, key: str) -> Optional[FetchResult]:
        with self._lock:
            return self._results.get(key)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._results

    def fetch(
        self,
        key: str,
        fetcher: Callable[[], Any],
        force: bool = False,
    ) -> FetchResult:
        """
        Return the cached result for ``key``, running ``fetcher`` if needed.

        While one caller runs ``fetcher`` for a key, other callers for the
        same key wait and receive that caller's result.
        """
        while True:
            with self._lock:
                if not force and key in self._results:
                    return self._results[key]
                event = self._inflight.get(key)
                owner = event is None
                if owner:
                    event = threading.Event()
                    self._inflight[key] = event

            if not owner:
                event.wait()
                force = False
                continue

            try:
                result = self._run(key, fetcher)
                with self._lock:
                    self._results[key] = result
            finally:
                with self._lock:
                    self._inflight.pop(key, None)
                event.set()
            return result

    @staticmethod
    def _run(key: str, fetcher: Callable[[], Any]) -> FetchResult:
        try:
            return FetchResult(data=fetcher())
        except ProductApiError as exc:
            logger.warning(f"Fetch for {key} failed: {exc}")
            return FetchResult(error=exc)

    def invalidate(self, key: Union[str, Callable[[str], bool]]) -> int:
        """
        Drop one key, or every key matching a predicate.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            if callable(key):
                doomed = [k for k in self._results if key(k)]
            else:
                doomed = [key] if key in self._results else []
            for k in doomed:
                del self._results[k]
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._results.clear()


# Process-wide cache shared by accessors created without an explicit one.
default_cache = FetchCache()


def is_listing_key(key: str) -> bool:
    return key.startswith(LIST_KEY_PREFIX)


def product_key(product_id: Any) -> str:
    return f"{ITEM_KEY_PREFIX}{product_id}"


class ProductListQuery:
    """
    Paginated, searchable product listing bound to a cache.

    Example:
        >>> query = ProductListQuery(api, limit=5)
        >>> query.data["pagination"]["total"]
        12
        >>> query.search = "pass"      # re-issues the request
    """

    def __init__(
        self,
        client: ProductApiClient,
        page: int = 1,
        limit: int = 10,
        search: str = "",
        cache: Optional[FetchCache] = None,
        immediate: bool = True,
    ) -> None:
        self._client = client
        self._cache = cache if cache is not None else default_cache
        self._page = page
        self._limit = limit
        self._search = search
        self._immediate = immediate
        if immediate:
            self.result()

    # =========================================================================
    # WATCHED PARAMETERS
    # =========================================================================
    @property
    def page(self) -> int:
        return self._page

    @page.setter
    def page(self, value: int) -> None:
        self._set("_page", value)

    @property
    def limit(self) -> int:
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        self._set("_limit", value)

    @property
    def search(self) -> str:
        return self._search

    @search.setter
    def search(self, value: str) -> None:
        self._set("_search", value)

    def _set(self, attr: str, value: Any) -> None:
        if getattr(self, attr) == value:
            return
        setattr(self, attr, value)
        if self._immediate:
            self.result()

    # =========================================================================
    # FETCHING
    # =========================================================================
    @property
    def query(self) -> Dict[str, Any]:
        """Query parameters sent to the API; ``search`` only when non-empty."""
        query: Dict[str, Any] = {"page": self._page, "limit": self._limit}
        if self._search:
            query["search"] = self._search
        return query

    @property
    def key(self) -> str:
        return LIST_KEY_PREFIX + json.dumps(self.query)

    def _fetch(self) -> Any:
        return self._client.list_products(self._page, self._limit, self._search)

    def result(self) -> FetchResult:
        return self._cache.fetch(self.key, self._fetch)

    def refresh(self) -> FetchResult:
        """Re-issue the current query, bypassing the cache."""
        return self._cache.fetch(self.key, self._fetch, force=True)

    @property
    def data(self) -> Any:
        return self.result().data

    @property
    def error(self) -> Optional[ProductApiError]:
        return self.result().error


class ProductByIdQuery:
    """A single product fetched by id, bound to a cache."""

    def __init__(
        self,
        client: ProductApiClient,
        product_id: Any,
        cache: Optional[FetchCache] = None,
        immediate: bool = True,
    ) -> None:
        self._client = client
        self._cache = cache if cache is not None else default_cache
        self._product_id = product_id
        self._immediate = immediate
        if immediate:
            self.result()

    @property
    def product_id(self) -> Any:
        return self._product_id

    @product_id.setter
    def product_id(self, value: Any) -> None:
        if value == self._product_id:
            return
        self._product_id = value
        if self._immediate:
            self.result()

    @property
    def key(self) -> str:
        return product_key(self._product_id)

    def _fetch(self) -> Any:
        return self._client.get_product(self._product_id)

    def result(self) -> FetchResult:
        return self._cache.fetch(self.key, self._fetch)

    def refresh(self) -> FetchResult:
        return self._cache.fetch(self.key, self._fetch, force=True)

    @property
    def data(self) -> Any:
        return self.result().data

    @property
    def error(self) -> Optional[ProductApiError]:
        return self.result().error


def update_product(
    client: ProductApiClient,
    product_id: Any,
    payload: Dict[str, Any],
    cache: Optional[FetchCache] = None,
) -> Dict[str, Any]:
    """
    Update a product and drop the cache entries it affects.

    Raises:
        ProductApiError: Re-raised unchanged when the update fails.
    """
    try:
        updated = client.update_product(product_id, payload)
    except ProductApiError as exc:
        logger.error(f"Error updating product {product_id}: {exc}")
        raise

    if cache is not None:
        cache.invalidate(product_key(product_id))
        cache.invalidate(is_listing_key)
    return updated
