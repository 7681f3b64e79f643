"""FastAPI application for the product catalog.

Intended usage:
    uvicorn catalog.infrastructure.http.app:create_app --factory

or ``catalog serve`` from the CLI.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from catalog.application.product_management import ProductManagementService
from catalog.infrastructure import bootstrap
from catalog.infrastructure.http import products
from catalog.infrastructure.http.errors import register_exception_handlers

logger = logging.getLogger(__name__)

API_TITLE = "Product Catalog API"
API_VERSION = "0.1.0"


def create_app(service: ProductManagementService | None = None) -> FastAPI:
    """Build the application around ``service``.

    Without an explicit service the JSON-backed one from the composition
    root is used.
    """
    app = FastAPI(title=API_TITLE, version=API_VERSION)
    app.state.product_service = (
        service if service is not None else bootstrap.product_management_service()
    )

    @app.get("/health", tags=["system"])
    def health() -> dict:
        return {"status": "ok", "version": API_VERSION}

    app.include_router(products.router)
    register_exception_handlers(app)

    logger.debug("HTTP application created (%s routes)", len(app.routes))
    return app
