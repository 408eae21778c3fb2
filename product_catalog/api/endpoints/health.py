"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends

from product_catalog.catalog.store import ProductStore
from product_catalog.core.dependencies import get_store


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: ProductStore):
        self._store = store

    def get_health(self) -> dict:
        """Get full health status."""
        return {
            "status": "healthy",
            "components": {
                "api": "healthy",
                "store": "healthy"
            },
            "details": {
                "products_loaded": self._store.count()
            }
        }


@router.get("")
async def health_check(store: ProductStore = Depends(get_store)):
    """
    Health check endpoint.

    Returns API status and the number of products in the store.
    """
    controller = HealthController(store)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness check for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness check for container orchestration."""
    return {"alive": True}
