"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response envelopes shared across the API.

==============================================================================
"""

from .common import ApiResponse, DeleteResponse, PaginationInfo

__all__ = [
    "ApiResponse",
    "DeleteResponse",
    "PaginationInfo",
]
