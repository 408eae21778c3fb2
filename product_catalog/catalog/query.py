"""
==============================================================================
Product Query Module
==============================================================================

Pure functions computing a filtered, paginated view of a product list.

Rules:
------
- ``search`` keeps products whose name contains it (case-insensitive)
- ``page`` and ``limit`` are 1-based and positive
- slices past the end of the filtered list are empty, never an error

Query Parameter Parsing:
-----------------------
Raw values go through ``parse_listing_params``. Values without a leading
integer, and values below 1, fall back to the defaults (page 1, limit 10).

==============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from product_catalog.schemas.common import ApiResponse, PaginationInfo
from product_catalog.utils.validators import parse_leading_int

from .models import Product


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ListingParams:
    """Parsed listing parameters."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str = ""


def _positive_or_default(raw: Any, default: int) -> int:
    value = parse_leading_int(raw)
    if value is None or value < 1:
        return default
    return value


def parse_listing_params(
    page: Any = None,
    limit: Any = None,
    search: Any = None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: Optional[int] = None
) -> ListingParams:
    """
    Parse raw listing query values with explicit defaults.

    Args:
        page: Raw page value
        limit: Raw limit value
        search: Raw search value
        default_limit: Limit used when ``limit`` is absent or invalid
        max_limit: Optional cap applied to ``limit``

    Returns:
        ListingParams with page >= 1 and limit >= 1

    Example:
        >>> parse_listing_params("2", "0", None)
        ListingParams(page=2, limit=10, search='')
    """
    parsed_limit = _positive_or_default(limit, default_limit)
    if max_limit is not None:
        parsed_limit = min(parsed_limit, max_limit)

    return ListingParams(
        page=_positive_or_default(page, DEFAULT_PAGE),
        limit=parsed_limit,
        search=str(search) if search else "",
    )


def filter_by_name(products: Sequence[Product], search: str) -> List[Product]:
    """Keep products whose name contains ``search``; empty search keeps all."""
    if not search:
        return list(products)
    return [product for product in products if product.matches_name(search)]


def paginate(items: Sequence[Product], page: int, limit: int) -> List[Product]:
    """Slice ``[(page-1)*limit, page*limit)`` out of ``items``."""
    start_index = (page - 1) * limit
    end_index = page * limit
    return list(items[start_index:end_index])


def compute_listing(
    products: Sequence[Product],
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    search: str = ""
) -> ApiResponse[Product]:
    """
    Compute the paginated listing envelope.

    Args:
        products: All products, in store order
        page: 1-based page number
        limit: Page size
        search: Case-insensitive name substring

    Returns:
        ApiResponse with the page of products and pagination metadata

    Raises:
        ValueError: If page or limit is below 1
    """
    if page < 1 or limit < 1:
        raise ValueError(f"page and limit must be positive (page={page}, limit={limit})")

    filtered = filter_by_name(products, search)

    return ApiResponse[Product](
        data=paginate(filtered, page, limit),
        pagination=PaginationInfo.create(total=len(filtered), page=page, limit=limit),
    )
