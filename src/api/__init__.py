"""FastAPI application setup."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.controller import product_router
from src.config import AppConfig, get_config
from src.services import ProductGenerator, ProductQueryService, ProductStore

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    store: Optional[ProductStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration; loaded via get_config() if omitted.
        store: Product store to serve. When omitted, one is opened at
            config.database.path and closed on shutdown.
    """
    config = config or get_config()
    owns_store = store is None
    if store is None:
        store = ProductStore(config.database.path)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info(f"Product catalog API starting ({config.environment})")
        yield
        if owns_store:
            store.close()
        logger.info("Product catalog API stopped")

    app = FastAPI(
        title="Product Catalog API",
        description="Product listing, ranked search and sample data generation",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.store = store
    app.state.generator = ProductGenerator(
        store,
        default_count=config.generator.default_count,
        max_batch_size=config.generator.max_batch_size,
    )
    app.state.query_service = ProductQueryService(store)
    app.state.started_at = time.monotonic()

    # Include routers
    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - app.state.started_at, 3),
            "environment": config.environment,
        }

    return app
