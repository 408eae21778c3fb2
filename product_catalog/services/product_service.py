"""
==============================================================================
Product Service Module
==============================================================================

Business logic behind the product collection and item endpoints.

This module implements:
- ProductService: list, create, read, update and delete operations
- Required-field checks on create
- Leading-integer parsing of path ids

Error Mapping:
-------------
- missing/blank id, missing fields, malformed body -> 400
- unknown id                                       -> 404

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from product_catalog.catalog.models import REQUIRED_FIELDS
from product_catalog.catalog.query import compute_listing, parse_listing_params
from product_catalog.catalog.store import ProductStore
from product_catalog.config import Settings, get_settings
from product_catalog.core import exceptions
from product_catalog.schemas.common import DeleteResponse
from product_catalog.utils.validators import RequiredFieldsValidator, parse_leading_int


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog service.

    Attributes:
        _store: ProductStore the operations act on
        _settings: Application settings (page size defaults)
        _validator: Required-field validator for creates

    Example:
        >>> service = ProductService(store)
        >>> service.list_products(page="1", limit="5", search="pass")
        {'data': [...], 'pagination': {...}}
        >>> service.get_product("12")
        {'id': 12, ...}
    """

    def __init__(
        self,
        store: ProductStore,
        settings: Optional[Settings] = None
    ) -> None:
        self._store = store
        self._settings = settings or get_settings()
        self._validator = RequiredFieldsValidator(REQUIRED_FIELDS)

    # =========================================================================
    # COLLECTION OPERATIONS
    # =========================================================================

    def list_products(
        self,
        page: Any = None,
        limit: Any = None,
        search: Any = None
    ) -> Dict[str, Any]:
        """
        List products with pagination and name search.

        Args:
            page: Raw page value (defaults to 1)
            limit: Raw page size (defaults to settings.default_page_limit)
            search: Case-insensitive name substring

        Returns:
            ``{data, pagination}`` envelope
        """
        params = parse_listing_params(
            page,
            limit,
            search,
            default_limit=self._settings.default_page_limit,
            max_limit=self._settings.max_page_limit,
        )
        listing = compute_listing(self._store.all(), params.page, params.limit, params.search)

        logger.debug(
            f"Listed products page={params.page} limit={params.limit} "
            f"search={params.search!r} total={listing.pagination.total}"
        )
        return listing.to_dict()

    def create_product(self, body: Any) -> Dict[str, Any]:
        """
        Create a product from a request body.

        Raises:
            AppException: INVALID_BODY if body is not an object,
                MISSING_REQUIRED_FIELDS if a required field is absent or blank
        """
        payload = self._require_object(body)

        is_valid, missing = self._validator.validate(payload)
        if not is_valid:
            logger.warning(f"Product creation rejected, missing fields: {missing}")
            raise exceptions.missing_required_fields(missing)

        product = self._store.add(payload)
        return product.to_dict()

    # =========================================================================
    # ITEM OPERATIONS
    # =========================================================================

    def get_product(self, id_param: Optional[str]) -> Dict[str, Any]:
        """Get a product by its path id."""
        product_id = self._parse_id(id_param)
        product = self._store.find(product_id)

        if not product:
            logger.debug(f"Product not found: {id_param!r}")
            raise exceptions.product_not_found(id_param)

        return product.to_dict()

    def update_product(self, id_param: Optional[str], body: Any) -> Dict[str, Any]:
        """
        Shallow-merge a body over a stored product.

        The stored id is kept whatever the body contains.
        """
        product_id = self._parse_id(id_param)
        payload = self._require_object(body)

        product = self._store.replace(product_id, payload)
        if not product:
            raise exceptions.product_not_found(id_param)

        return product.to_dict()

    def delete_product(self, id_param: Optional[str]) -> Dict[str, Any]:
        """Delete a product and return it in a confirmation envelope."""
        product_id = self._parse_id(id_param)

        removed = self._store.remove(product_id)
        if not removed:
            raise exceptions.product_not_found(id_param)

        return DeleteResponse(product=removed.to_dict()).model_dump()

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _parse_id(id_param: Optional[str]) -> Optional[int]:
        """Parse a path id; None means it can never match a stored product."""
        if id_param is None or not str(id_param).strip():
            raise exceptions.product_id_required()
        return parse_leading_int(id_param)

    @staticmethod
    def _require_object(body: Any) -> Dict[str, Any]:
        if not isinstance(body, dict):
            raise exceptions.invalid_body()
        return body

