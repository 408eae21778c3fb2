"""
==============================================================================
Product API Client Module
==============================================================================

Thin wrapper around an httpx.Client with one method per catalog endpoint.

Methods:
--------
- list_products: Paginated, searchable listing
- get_product: Single product by id
- create_product: Create a product
- update_product: Shallow-update a product
- delete_product: Delete a product

Errors:
-------
Every non-2xx response raises ProductApiError carrying the status code and
the server's statusMessage. Transport failures raise the same error with
status_code set to None.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from product_catalog.config import get_settings


logger = logging.getLogger(__name__)


class ProductApiError(Exception):
    """
    Raised when a catalog API call fails.

    Attributes:
        status_code: HTTP status, or ``None`` for transport failures.
        status_message: Server-supplied message, or the transport error text.
        body: Parsed JSON error body when the server sent one.
    """

    def __init__(
        self,
        status_code: Optional[int],
        status_message: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.status_code = status_code
        self.status_message = status_message
        self.body = body or {}
        super().__init__(f"{status_code}: {status_message}" if status_code else status_message)


class ProductApiClient:
    """Client for the product catalog REST API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = 15.0,
    ) -> None:
        """
        Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
                Defaults to ``settings.api_base_url``. Ignored when ``client``
                is supplied, whose own base URL is used instead.
            client: Optional pre-built httpx client (a FastAPI ``TestClient``
                works too).
            timeout: Request timeout in seconds for the client built here.
        """
        if client is None:
            base_url = base_url if base_url is not None else get_settings().api_base_url
            client = httpx.Client(base_url=base_url, timeout=timeout)
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ProductApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # =========================================================================
    # LOW LEVEL HTTP HELPER
    # =========================================================================
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Any = None,
    ) -> Any:
        """
        Perform a request and return the decoded JSON body.

        Raises:
            ProductApiError: On non-2xx responses or transport failures.
        """
        logger.debug(f"Sending {method} request to {path}")
        try:
            response = self._client.request(method, path, params=params, json=json_body)
        except httpx.HTTPError as exc:
            logger.error(f"API request failed: {exc}")
            raise ProductApiError(None, str(exc)) from exc

        if response.is_error:
            body: Dict[str, Any] = {}
            message = response.reason_phrase
            try:
                parsed = response.json()
                if isinstance(parsed, dict):
                    body = parsed
                    message = parsed.get("statusMessage") or parsed.get("detail") or message
            except ValueError:
                message = response.text or message
            logger.error(f"API request failed ({response.status_code}): {message}")
            raise ProductApiError(response.status_code, message, body)

        return response.json() if response.content else None

    # =========================================================================
    # COLLECTION OPERATIONS
    # =========================================================================
    def list_products(
        self,
        page: int = 1,
        limit: int = 10,
        search: str = "",
    ) -> Dict[str, Any]:
        """
        Fetch one page of products.

        ``search`` is only sent when non-empty.
        """
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if search:
            params["search"] = search
        return self._request("GET", "/api/products", params=params)

    def create_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/products", json_body=payload)

    # =========================================================================
    # ITEM OPERATIONS
    # =========================================================================
    def get_product(self, product_id: Any) -> Dict[str, Any]:
        return self._request("GET", f"/api/products/{product_id}")

    def update_product(self, product_id: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/products/{product_id}", json_body=payload)

    def delete_product(self, product_id: Any) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/products/{product_id}")
