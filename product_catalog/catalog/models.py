"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog records.

Wire names are camelCase (``productTagline``, ``gvtId``...); Python code uses
the snake_case attribute names. Unknown keys are kept on the record.
Field values are stored exactly as supplied; only ``id`` is typed.

==============================================================================
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Fields a client must supply when creating a product
REQUIRED_FIELDS = (
    "gvtId",
    "name",
    "productTagline",
    "shortDescription",
    "longDescription",
    "productUrl",
    "voucherTypeName",
    "orderUrl",
    "productTitle",
)


class Product(BaseModel):
    """
    Product model for catalog records.

    Represents a redeemable offer/voucher in the catalog.

    Attributes:
        id: Store-assigned identifier, unique and immutable
        gvt_id: Upstream product identifier
        name: Product display name (used by search)
        product_tagline: One-line tagline
        short_description: Short description
        long_description: Long description
        logo_location: Logo image URL
        product_url: Product page URL
        voucher_type_name: Voucher type
        order_url: Order page URL
        product_title: Product title
        variable_denom_price_min_amount: Lower price bound (numeric string)
        variable_denom_price_max_amount: Upper price bound (numeric string)
        typename: Source type tag (``__typename`` on the wire)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: int = Field(..., description="Product identifier")
    gvt_id: Optional[Any] = Field(default=None, description="Upstream product id")
    name: Optional[Any] = Field(default=None, description="Product name")
    product_tagline: Optional[Any] = None
    short_description: Optional[Any] = None
    long_description: Optional[Any] = None
    logo_location: Optional[Any] = None
    product_url: Optional[Any] = None
    voucher_type_name: Optional[Any] = None
    order_url: Optional[Any] = None
    product_title: Optional[Any] = None
    variable_denom_price_min_amount: Optional[Any] = None
    variable_denom_price_max_amount: Optional[Any] = None
    typename: Optional[Any] = Field(default=None, alias="__typename")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with wire names, keeping only the keys that were supplied."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def merged(self, fields: Dict[str, Any]) -> "Product":
        """Return a copy with ``fields`` shallow-merged over this record; id is kept."""
        return Product.model_validate({**self.to_dict(), **fields, "id": self.id})

    def matches_name(self, search: str) -> bool:
        """Case-insensitive substring match on name."""
        if self.name is None:
            return False
        return search.lower() in str(self.name).lower()
