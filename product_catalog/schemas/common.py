"""
==============================================================================
Common Schemas Module
==============================================================================

Response envelopes shared by the product endpoints.

==============================================================================
"""

import math
from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class PaginationInfo(BaseModel):
    """Page metadata derived from the filtered result size."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total_pages: int = Field(ge=0)

    @classmethod
    def create(cls, total: int, page: int, limit: int) -> "PaginationInfo":
        """Factory method computing ``total_pages``."""
        return cls(total=total, page=page, limit=limit, total_pages=math.ceil(total / limit))


class ApiResponse(BaseModel, Generic[T]):
    """Paginated list envelope: ``{data, pagination}``."""

    data: List[T]
    pagination: PaginationInfo

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class DeleteResponse(BaseModel):
    """Delete confirmation with the removed record."""

    message: str = Field(default="Product deleted successfully")
    product: Dict[str, Any]
