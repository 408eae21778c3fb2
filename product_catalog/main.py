"""
==============================================================================
Product Catalog Service - Application Entry Point
==============================================================================

FastAPI application with:
- In-memory product store seeded from JSON at startup
- REST endpoints for listing, creating, reading, updating, deleting products
- Consistent JSON error envelope

Usage:
------
    # Development
    uvicorn product_catalog.main:app --reload

    # Production
    uvicorn product_catalog.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_catalog import __version__
from product_catalog.api.router import api_router
from product_catalog.catalog.store import ProductStore
from product_catalog.config import Settings, get_settings
from product_catalog.core.exceptions import register_exception_handlers


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Store creation and seeding on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup

    A prebuilt store can be injected (tests do this); it is then used as-is
    and no seed file is read.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[ProductStore] = None
    ):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._seed_on_startup = store is None
        self._store = store if store is not None else ProductStore()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="In-memory product catalog with paginated search",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        app.state.store = self._store
        app.state.settings = self._settings

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info(f"Starting {self._settings.app_name}")

        if self._seed_on_startup:
            self._load_store()

        logger.info(f"{self._settings.app_name} ready with {self._store.count()} products")
        logger.info(f"API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("Shutting down")

    def _load_store(self) -> None:
        """Seed the store from the configured products file."""
        products_path = self._settings.products_path
        if not products_path.exists():
            logger.warning(f"Products file not found: {products_path}, starting empty")
            return

        self._store.load(products_path)

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app

    @property
    def store(self) -> ProductStore:
        """Get the product store backing this application."""
        return self._store


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
